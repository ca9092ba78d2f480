"""Process class for builtin command execution"""

import logging
from typing import Callable, List, Optional

from .context import CommandContext
from .exit_codes import EXIT_CODE_ERROR
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)

EXIT_CODE_NOT_FOUND = 127


class Process:
    """Represents a single builtin invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable[['Process'], int]] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            stdout: Output stream
            stderr: Error stream
            executor: Callable that executes the command
            context: CommandContext with the variable store and session state
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    @property
    def store(self):
        """Shortcut for process.context.store"""
        return self.context.store

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            self.stderr.write(f"Error: No such command '{self.command}'\n")
            self.exit_code = EXIT_CODE_NOT_FOUND
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except Exception as e:
            logger.exception("builtin %s failed", self.command)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = EXIT_CODE_ERROR

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> bytes:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> bytes:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
