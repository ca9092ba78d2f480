"""
Built-in shell commands registry.

All built-in commands live in the commands/ directory.
This module loads them and exposes a lookup function.
"""

from .commands import load_all_commands, BUILTINS as COMMANDS

# Load all command modules to populate the registry
load_all_commands()

BUILTINS = COMMANDS


def get_builtin(command: str):
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('set')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)
