"""Shell facade for varset-shell.

The Shell owns the variable store and session state (last exit status,
interactive flag) and runs builtins against them.

Example:
    >>> shell = Shell()
    >>> shell.execute('set', ['foo', 'a', 'b']).exit_code
    0
    >>> shell.store.get('foo')
    ['a', 'b']
"""

import logging
from typing import Iterable, List, Mapping, Optional

from .builtins import get_builtin
from .context import CommandContext
from .path_validator import DEFAULT_PATH_VARIABLES, PathValidator
from .process import Process
from .streams import ErrorStream, OutputStream
from .variable_store import VariableStore

logger = logging.getLogger(__name__)


class Shell:
    """Runs builtins against a shared variable store.

    Attributes:
        store: The variable store
        context: CommandContext handed to every builtin
    """

    def __init__(
        self,
        store: Optional[VariableStore] = None,
        initial_env: Optional[Mapping[str, str]] = None,
        interactive: bool = False,
        path_variables: Iterable[str] = DEFAULT_PATH_VARIABLES,
    ):
        """Initialize the shell.

        Args:
            store: Variable store to use; a new one is created if omitted
            initial_env: Environment to import as exported globals when a new
                store is created
            interactive: Whether the session is interactive
            path_variables: Names of variables whose entries are validated
                as directories
        """
        if store is None:
            env = dict(initial_env or {})
            store = VariableStore(initial_globals=env, exported=env.keys())
        self.store = store
        self.context = CommandContext(
            store=store,
            interactive=interactive,
            path_validator=PathValidator(path_variables),
        )

    @property
    def last_status(self) -> int:
        return self.context.last_status

    @last_status.setter
    def last_status(self, value: int) -> None:
        self.context.last_status = value

    def execute(self, command: str, args: List[str],
                stdout: Optional[OutputStream] = None,
                stderr: Optional[ErrorStream] = None) -> Process:
        """Run a builtin and record its exit status.

        Args:
            command: Builtin name
            args: Arguments to the builtin
            stdout: Output stream (captured in memory if omitted)
            stderr: Error stream (captured in memory if omitted)

        Returns:
            The finished Process
        """
        process = Process(
            command=command,
            args=list(args),
            stdout=stdout,
            stderr=stderr,
            executor=get_builtin(command),
            context=self.context,
        )
        self.last_status = process.execute()
        logger.debug("%r exited with %d", process, self.last_status)
        return process

    def push_scope(self) -> None:
        """Enter a function scope."""
        self.context.push_local_scope()

    def pop_scope(self) -> None:
        """Leave the current function scope."""
        self.context.pop_local_scope()
