"""
Tests for CommandContext.

This module tests the CommandContext dataclass that encapsulates
command execution context.
"""

from varset_shell.context import CommandContext
from varset_shell.path_validator import PathValidator
from varset_shell.variable_store import Scope, VariableStore


class TestCommandContextCreation:
    """Test CommandContext creation and initialization"""

    def test_default_creation(self):
        """Test creating context with default values"""
        ctx = CommandContext()
        assert isinstance(ctx.store, VariableStore)
        assert isinstance(ctx.path_validator, PathValidator)
        assert ctx.last_status == 0
        assert ctx.interactive is False

    def test_contexts_do_not_share_stores(self):
        """Test each default context gets its own store"""
        a = CommandContext()
        b = CommandContext()
        a.store.set('FOO', ['bar'])
        assert b.store.get('FOO') is None

    def test_creation_with_store(self, populated_store):
        """Test creating context around an existing store"""
        ctx = CommandContext(store=populated_store, last_status=2)
        assert ctx.store.get('foo') == ['a', 'b', 'c']
        assert ctx.last_status == 2


class TestStoreAccess:
    """Test the store is reachable through the context"""

    def test_set_and_get(self):
        ctx = CommandContext()
        ctx.store.set('x', ['1', '2'])
        assert ctx.store.get('x') == ['1', '2']

    def test_scoped_get(self, populated_store):
        ctx = CommandContext(store=populated_store)
        assert ctx.store.get('EDITOR', Scope.UNIVERSAL) == ['vim']
        assert ctx.store.get('EDITOR', Scope.GLOBAL) is None

    def test_local_scopes(self):
        """Test push/pop of local scopes"""
        ctx = CommandContext()
        ctx.store.set('x', ['global'], Scope.GLOBAL)
        ctx.push_local_scope()
        ctx.store.set('x', ['local'], Scope.LOCAL)
        assert ctx.store.get('x') == ['local']
        ctx.pop_local_scope()
        assert ctx.store.get('x') == ['global']

    def test_repr(self):
        ctx = CommandContext(last_status=1)
        text = repr(ctx)
        assert "last_status=1" in text
        assert "local_scopes=1" in text
