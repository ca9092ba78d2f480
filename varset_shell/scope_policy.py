"""
Scope and mode resolution for the set builtin.

Turns the parsed option flags into a validated (ScopeDescriptor,
OperationMode) pair, rejecting combinations that make no sense before any
variable is touched.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import OptionConflictError
from .variable_store import ExportMode, Scope


class OperationMode(enum.Enum):
    """What the set builtin has been asked to do."""

    ASSIGN = "assign"
    ERASE = "erase"
    QUERY = "query"
    LIST_NAMES = "list_names"
    SHOW = "show"


@dataclass
class SetFlags:
    """Option flags given to the set builtin."""

    local: bool = False
    global_: bool = False
    universal: bool = False
    export: bool = False
    unexport: bool = False
    erase: bool = False
    names: bool = False
    query: bool = False
    show: bool = False
    long: bool = False
    help: bool = False

    @property
    def preserves_status(self) -> bool:
        """Whether a successful run passes the previous exit status through."""
        return not (self.erase or self.names or self.query or self.show)


@dataclass(frozen=True)
class ScopeDescriptor:
    """
    Where a variable is read from or written to.

    Attributes:
        scope: Explicit scope, or None to leave the choice to the store
        export: Export modifier for writes
    """

    scope: Optional[Scope] = None
    export: ExportMode = ExportMode.UNSPECIFIED


ERR_COMBO = "Invalid combination of options"
ERR_GLOCAL = "Variable scope can only be one of universal, global and local"
ERR_EXPUNEXP = "Variable can't be both exported and unexported"


def resolve_policy(flags: SetFlags, command: str = "set") -> Tuple[ScopeDescriptor, OperationMode]:
    """
    Validate flags and derive the scope descriptor and operation mode.

    Args:
        flags: Parsed option flags
        command: Command name for error messages

    Returns:
        Tuple of (ScopeDescriptor, OperationMode)

    Raises:
        OptionConflictError: If the flags are contradictory
    """
    if flags.query and (flags.erase or flags.names):
        raise OptionConflictError(command, ERR_COMBO)

    if flags.erase and flags.names:
        raise OptionConflictError(command, ERR_COMBO)

    if flags.show and (flags.erase or flags.names or flags.query):
        raise OptionConflictError(command, ERR_COMBO)

    if flags.local + flags.global_ + flags.universal > 1:
        raise OptionConflictError(command, ERR_GLOCAL)

    if flags.export and flags.unexport:
        raise OptionConflictError(command, ERR_EXPUNEXP)

    scope = None
    if flags.local:
        scope = Scope.LOCAL
    elif flags.global_:
        scope = Scope.GLOBAL
    elif flags.universal:
        scope = Scope.UNIVERSAL

    export = ExportMode.UNSPECIFIED
    if flags.export:
        export = ExportMode.EXPORT
    elif flags.unexport:
        export = ExportMode.UNEXPORT

    if flags.show:
        mode = OperationMode.SHOW
    elif flags.query:
        mode = OperationMode.QUERY
    elif flags.erase:
        mode = OperationMode.ERASE
    elif flags.names:
        mode = OperationMode.LIST_NAMES
    else:
        mode = OperationMode.ASSIGN

    return ScopeDescriptor(scope=scope, export=export), mode
