"""Unit tests for PathValidator component."""

import errno
import os

import pytest

from varset_shell.path_validator import PathValidator


class TestAppliesTo:
    """Tests for deciding which variables are validated."""

    def test_default_variables(self):
        """Test PATH and CDPATH are validated by default."""
        pv = PathValidator()
        assert pv.applies_to("PATH")
        assert pv.applies_to("CDPATH")
        assert not pv.applies_to("MANPATH")

    def test_custom_variables(self):
        """Test the validated set can be configured."""
        pv = PathValidator(path_variables=["MANPATH"])
        assert pv.applies_to("MANPATH")
        assert not pv.applies_to("PATH")


class TestValidate:
    """Tests for validating path entries."""

    def test_valid_directory(self, path_dirs):
        """Test an existing directory passes."""
        result = PathValidator().validate("PATH", [path_dirs['bin']])
        assert result.ok
        assert result.warnings == []

    def test_missing_directory(self, path_dirs):
        """Test a missing directory fails with a warning."""
        result = PathValidator().validate("PATH", [path_dirs['missing']])
        assert not result.ok
        assert len(result.warnings) == 1
        assert result.warnings[0].path == path_dirs['missing']
        assert result.warnings[0].reason == os.strerror(errno.ENOENT)

    def test_regular_file(self, path_dirs):
        """Test a regular file is rejected as not a directory."""
        result = PathValidator().validate("PATH", [path_dirs['file']])
        assert not result.ok
        assert result.warnings[0].reason == "Not a directory"

    def test_relative_entries_not_checked(self):
        """Test entries not starting with / are accepted as-is."""
        result = PathValidator().validate("PATH", ["relative/dir", "bin"])
        assert result.ok
        assert result.warnings == []

    def test_existing_entries_not_checked(self):
        """Test entries already in the variable are accepted."""
        result = PathValidator().validate("PATH", ["/not/a/dir"], existing=["/not/a/dir"])
        assert result.ok
        assert result.warnings == []

    def test_any_success_rule(self, path_dirs):
        """Test one good entry makes the assignment succeed despite bad ones."""
        result = PathValidator().validate(
            "PATH", ["/not/a/dir", path_dirs['bin']]
        )
        assert result.ok
        assert result.any_success
        assert [w.path for w in result.warnings] == ["/not/a/dir"]

    def test_all_entries_fail(self, path_dirs):
        """Test the assignment fails when no entry passes."""
        result = PathValidator().validate("PATH", [path_dirs['missing'], path_dirs['file']])
        assert not result.ok
        assert len(result.warnings) == 2

    def test_empty_values_ok(self):
        """Test assigning no entries is not a failure."""
        result = PathValidator().validate("PATH", [])
        assert result.ok
        assert not result.any_success

    def test_colon_hint(self, path_dirs):
        """Test a colon-joined entry produces a hint."""
        entry = f"{path_dirs['missing']}:/usr/bin"
        result = PathValidator().validate("PATH", [entry])
        assert result.warnings[0].hint == "set: Did you mean 'set PATH $PATH /usr/bin'?"

    def test_trailing_colon_no_hint(self, path_dirs):
        """Test a colon with nothing after it gives no hint."""
        result = PathValidator().validate("PATH", [path_dirs['missing'] + ":"])
        assert result.warnings[0].hint is None

    def test_warning_format(self, path_dirs):
        """Test the warning message names variable, entry and reason."""
        result = PathValidator().validate("CDPATH", [path_dirs['file']])
        assert result.warnings[0].format() == (
            f'set: Warning: $CDPATH entry "{path_dirs["file"]}" is not valid (Not a directory)'
        )

    def test_access_denied_reason(self, path_dirs):
        """Test a directory failing the X_OK check reports EACCES."""
        from unittest.mock import patch

        with patch('varset_shell.path_validator.os.access', return_value=False):
            result = PathValidator().validate("PATH", [path_dirs['bin']])
        assert not result.ok
        assert result.warnings[0].reason == os.strerror(errno.EACCES)

    @pytest.mark.skipif(hasattr(os, 'geteuid') and os.geteuid() == 0,
                        reason="permission checks are bypassed for root")
    def test_unsearchable_directory(self, tmp_path):
        """Test a directory without execute permission is rejected."""
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o600)
        try:
            result = PathValidator().validate("PATH", [str(locked)])
            assert not result.ok
            assert result.warnings[0].reason == os.strerror(errno.EACCES)
        finally:
            locked.chmod(0o700)
