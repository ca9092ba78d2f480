"""Unit tests for option validation and mode resolution."""

import pytest

from varset_shell.exceptions import OptionConflictError
from varset_shell.scope_policy import (
    OperationMode,
    ScopeDescriptor,
    SetFlags,
    resolve_policy,
)
from varset_shell.variable_store import ExportMode, Scope


class TestScopeResolution:
    """Tests for the resolved scope and export mode."""

    def test_no_flags(self):
        """Test the default is an unscoped assignment."""
        descriptor, mode = resolve_policy(SetFlags())
        assert descriptor == ScopeDescriptor(scope=None, export=ExportMode.UNSPECIFIED)
        assert mode is OperationMode.ASSIGN

    @pytest.mark.parametrize("flag, scope", [
        ("local", Scope.LOCAL),
        ("global_", Scope.GLOBAL),
        ("universal", Scope.UNIVERSAL),
    ])
    def test_single_scope(self, flag, scope):
        """Test each scope flag maps to its scope."""
        descriptor, _ = resolve_policy(SetFlags(**{flag: True}))
        assert descriptor.scope is scope

    def test_export_and_unexport(self):
        """Test export flags map to export modes."""
        assert resolve_policy(SetFlags(export=True))[0].export is ExportMode.EXPORT
        assert resolve_policy(SetFlags(unexport=True))[0].export is ExportMode.UNEXPORT

    def test_scope_with_export(self):
        """Test scope and export flags combine."""
        descriptor, _ = resolve_policy(SetFlags(universal=True, export=True))
        assert descriptor == ScopeDescriptor(Scope.UNIVERSAL, ExportMode.EXPORT)


class TestModes:
    """Tests for operation mode selection."""

    @pytest.mark.parametrize("flag, mode", [
        ("erase", OperationMode.ERASE),
        ("query", OperationMode.QUERY),
        ("names", OperationMode.LIST_NAMES),
        ("show", OperationMode.SHOW),
    ])
    def test_mode_flags(self, flag, mode):
        """Test each mode flag selects its mode."""
        assert resolve_policy(SetFlags(**{flag: True}))[1] is mode

    def test_query_with_scope(self):
        """Test query can be limited to a scope."""
        descriptor, mode = resolve_policy(SetFlags(query=True, global_=True))
        assert mode is OperationMode.QUERY
        assert descriptor.scope is Scope.GLOBAL


class TestConflicts:
    """Tests for rejected flag combinations."""

    def test_two_scopes(self):
        """Test two scope flags are rejected."""
        with pytest.raises(OptionConflictError, match="one of universal, global and local"):
            resolve_policy(SetFlags(local=True, universal=True))

    def test_three_scopes(self):
        """Test all three scope flags are rejected."""
        with pytest.raises(OptionConflictError):
            resolve_policy(SetFlags(local=True, global_=True, universal=True))

    def test_export_and_unexport(self):
        """Test export with unexport is rejected."""
        with pytest.raises(OptionConflictError, match="both exported and unexported"):
            resolve_policy(SetFlags(export=True, unexport=True))

    @pytest.mark.parametrize("flags", [
        SetFlags(query=True, erase=True),
        SetFlags(query=True, names=True),
        SetFlags(erase=True, names=True),
        SetFlags(show=True, erase=True),
    ])
    def test_mode_combinations(self, flags):
        """Test incompatible modes are rejected."""
        with pytest.raises(OptionConflictError, match="Invalid combination of options"):
            resolve_policy(flags)

    def test_conflict_exit_code(self):
        """Test conflicts report invalid-arguments status."""
        with pytest.raises(OptionConflictError) as excinfo:
            resolve_policy(SetFlags(query=True, erase=True))
        assert excinfo.value.exit_code == 2


class TestPreservesStatus:
    """Tests for SetFlags.preserves_status."""

    def test_plain_assignment_preserves(self):
        """Test assignment flags keep the previous status."""
        assert SetFlags().preserves_status
        assert SetFlags(global_=True, export=True, long=True).preserves_status

    @pytest.mark.parametrize("flag", ["erase", "names", "query", "show"])
    def test_mode_flags_do_not_preserve(self, flag):
        """Test mode flags report their own status."""
        assert not SetFlags(**{flag: True}).preserves_status
