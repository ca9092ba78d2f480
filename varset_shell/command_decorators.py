"""
Decorators for builtin command functions.

The @command() decorator turns a ShellError escaping a builtin into a
message on the process error stream plus the error's exit code.
"""

import functools
from typing import Callable, Optional

from .exceptions import CommandError, ParsingError, ShellError
from .process import Process


def command(usage: Optional[str] = None) -> Callable:
    """
    Wrap a builtin so shell errors become an error message and exit code.

    Args:
        usage: Usage text printed after argument and parsing errors

    Example:
        @register_command('set')
        @command(usage="set [options] [name [value ...]]")
        def cmd_set(process): ...
    """
    def decorator(func: Callable[[Process], int]) -> Callable[[Process], int]:
        @functools.wraps(func)
        def wrapper(process: Process) -> int:
            try:
                return func(process)
            except ShellError as e:
                process.stderr.write(f"{process.command}: {e.message}\n")
                if usage and isinstance(e, (CommandError, ParsingError)):
                    process.stderr.write(f"usage: {usage}\n")
                return e.exit_code

        return wrapper

    return decorator
