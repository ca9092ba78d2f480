"""
Pytest configuration and shared fixtures for varset-shell tests.

This module provides reusable test fixtures for:
- Variable stores with preloaded scopes
- Shell instances
- Directory trees for path-variable validation
- Helper utilities for running `set` and reading its output
"""

import pytest

from varset_shell.context import CommandContext
from varset_shell.process import Process
from varset_shell.shell import Shell
from varset_shell.variable_store import Scope, VariableStore


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def store():
    """
    Provides an empty variable store.

    Example:
        def test_get(store):
            store.set('foo', ['a'])
            assert store.get('foo') == ['a']
    """
    return VariableStore()


@pytest.fixture
def populated_store():
    """
    Provides a store with variables in every scope.

    Returns:
        VariableStore: 'foo' is global [a b c], 'EDITOR' is an exported
        universal, 'item' is a top-level local
    """
    vs = VariableStore(
        initial_globals={'foo': ['a', 'b', 'c'], 'HOME': '/home/test'},
        initial_universals={'EDITOR': 'vim'},
        exported=['EDITOR', 'HOME'],
    )
    vs.set('item', ['one'], Scope.LOCAL)
    return vs


@pytest.fixture
def shell():
    """
    Provides a non-interactive shell with an empty store.

    Example:
        def test_set(shell):
            shell.execute('set', ['foo', 'bar'])
            assert shell.store.get('foo') == ['bar']
    """
    return Shell()


@pytest.fixture
def interactive_shell():
    """Provides an interactive shell with an empty store."""
    return Shell(interactive=True)


@pytest.fixture
def path_dirs(tmp_path):
    """
    Provides directories and files for PATH validation.

    Returns:
        dict: 'bin' and 'sbin' are searchable directories, 'file' is a
        regular file, 'missing' does not exist
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    sbin_dir = tmp_path / "sbin"
    sbin_dir.mkdir()
    regular = tmp_path / "not_a_dir.txt"
    regular.write_text("x")

    return {
        'bin': str(bin_dir),
        'sbin': str(sbin_dir),
        'file': str(regular),
        'missing': str(tmp_path / "missing"),
    }


@pytest.fixture
def make_process(store):
    """
    Provides a factory for Process objects sharing the `store` fixture.

    Example:
        def test_cmd(make_process):
            process = make_process(['foo', 'bar'])
            assert cmd_set(process) == 0
    """
    def factory(args, last_status=0, interactive=False):
        context = CommandContext(store=store, last_status=last_status, interactive=interactive)
        return Process(command='set', args=list(args), context=context)

    return factory


# ============================================================================
# Helper Functions
# ============================================================================

def run_set(shell, *args):
    """Run `set` with the given arguments and return the finished process."""
    return shell.execute('set', list(args))


def get_stdout(process) -> str:
    """Get stdout content as string."""
    return process.get_stdout().decode('utf-8', errors='replace')


def get_stderr(process) -> str:
    """Get stderr content as string."""
    return process.get_stderr().decode('utf-8', errors='replace')


# Make helper functions available as pytest helpers
pytest.run_set = run_set
pytest.get_stdout = get_stdout
pytest.get_stderr = get_stderr
