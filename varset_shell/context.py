"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples commands
from the Shell class, making commands more testable and the architecture
more modular.
"""

from dataclasses import dataclass, field

from .path_validator import PathValidator
from .variable_store import VariableStore


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - The scoped variable store
    - The exit status of the previous command
    - Whether the session is interactive
    - The validator for path-like variables

    Commands should use this context instead of direct Shell access.

    Example:
        >>> from varset_shell.context import CommandContext
        >>> ctx = CommandContext(last_status=1)
        >>> ctx.store.get('FOO') is None
        True
    """

    store: VariableStore = field(default_factory=VariableStore)
    last_status: int = 0
    interactive: bool = False
    path_validator: PathValidator = field(default_factory=PathValidator)

    def push_local_scope(self):
        """Create a new local variable scope (entering a function)."""
        self.store.push_scope()

    def pop_local_scope(self):
        """Remove the current local variable scope (leaving a function)."""
        self.store.pop_scope()

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(variables={len(self.store.list_names())}, "
            f"last_status={self.last_status}, "
            f"interactive={self.interactive}, "
            f"local_scopes={len(self.store.local_scopes)})"
        )
