"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Dict, List, Tuple

from ..exceptions import InvalidArgumentError
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.stderr.write(f"{process.command}: {message}\n")
    else:
        process.stderr.write(f"{message}\n")


def _match_long_option(spelling: str, long_options: Dict[str, str], command: str) -> str:
    """
    Resolve a long option, accepting any unambiguous prefix.

    Raises:
        InvalidArgumentError: If nothing matches or the prefix is ambiguous
    """
    if spelling in long_options:
        return long_options[spelling]

    matches = {name for option, name in long_options.items() if option.startswith(spelling)}
    if not matches:
        raise InvalidArgumentError(command, f"--{spelling}")
    if len(matches) > 1:
        raise InvalidArgumentError(command, f"--{spelling}",
                                   message=f"Ambiguous option '--{spelling}'")
    return matches.pop()


def parse_options(args: List[str], short_options: Dict[str, str],
                  long_options: Dict[str, str], command: str) -> Tuple[List[str], List[str]]:
    """
    Parse leading options off an argument list.

    Parsing stops at the first argument that is not an option, or after
    '--'; everything from there on is positional. Short options may be
    grouped ('-gx') and long options may be abbreviated ('--glob').

    Args:
        args: Arguments to parse
        short_options: Maps option letters to option names, e.g. {'g': 'global'}
        long_options: Maps long option spellings to option names,
            e.g. {'global': 'global'}
        command: Command name for error messages

    Returns:
        Tuple of (option names in the order given, positional args)

    Raises:
        InvalidArgumentError: On an unknown option

    Example:
        >>> parse_options(['-gx', 'FOO', '-e'], {'g': 'global', 'x': 'export',
        ...               'e': 'erase'}, {}, 'set')
        (['global', 'export'], ['FOO', '-e'])
    """
    options: List[str] = []
    i = 0

    while i < len(args):
        arg = args[i]

        # Check for '--' which stops option parsing
        if arg == '--':
            i += 1
            break

        if arg.startswith('--'):
            options.append(_match_long_option(arg[2:], long_options, command))
        elif arg.startswith('-') and len(arg) > 1:
            for letter in arg[1:]:
                name = short_options.get(letter)
                if name is None:
                    raise InvalidArgumentError(command, f"-{letter}")
                options.append(name)
        else:
            break

        i += 1

    return options, args[i:]


__all__ = [
    'write_error',
    'parse_options',
]
