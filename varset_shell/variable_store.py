"""Variable storage for varset-shell.

This module provides the VariableStore class which handles:
- Local variable scopes (a top-level block scope plus function scopes)
- Global variables
- Universal variables (shared between sessions; persistence is not handled here)
- Export flags and special (read-only, global-only, validated) variables

Every variable holds an ordered list of strings. A missing variable (None),
a variable with no elements ([]) and a variable holding one empty string
([""]) are three different states.
"""

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Set

logger = logging.getLogger(__name__)


class Scope(enum.Enum):
    """Visibility tier of a variable."""

    LOCAL = "local"
    GLOBAL = "global"
    UNIVERSAL = "universal"


class ExportMode(enum.Enum):
    """Export modifier requested for a write."""

    UNSPECIFIED = "unspecified"
    EXPORT = "export"
    UNEXPORT = "unexport"


class SetResult(enum.Enum):
    """Outcome of VariableStore.set()."""

    OK = "ok"
    PERMISSION_DENIED = "permission_denied"
    WRONG_SCOPE = "wrong_scope"
    INVALID_VALUE = "invalid_value"


class RemoveResult(enum.Enum):
    """Outcome of VariableStore.remove()."""

    OK = "ok"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"


# Variables maintained by the shell itself
READ_ONLY_VARIABLES = frozenset({"status", "version", "history", "_", "PWD", "SHLVL"})

# Variables that only make sense in the global scope
GLOBAL_ONLY_VARIABLES = frozenset({"umask", "COLUMNS", "LINES"})

_OCTAL_RE = re.compile(r"^[0-7]{1,4}$")


def _valid_umask(values: List[str]) -> bool:
    if len(values) != 1 or not _OCTAL_RE.match(values[0]):
        return False
    return int(values[0], 8) <= 0o777


VALUE_VALIDATORS: Dict[str, Callable[[List[str]], bool]] = {
    "umask": _valid_umask,
}


@dataclass
class Variable:
    """A stored variable.

    Attributes:
        values: Ordered elements of the variable
        exported: Whether the variable is marked for export
    """

    values: List[str] = field(default_factory=list)
    exported: bool = False


class VariableStore:
    """Scoped variable store.

    Lookups without an explicit scope search the local scopes from innermost
    to outermost, then globals, then universals. Writes without an explicit
    scope update the first scope that already holds the name; new names go to
    the innermost function scope if one is active, otherwise to globals.

    Attributes:
        local_scopes: Stack of local scopes; index 0 is the top-level block
        globals: Global variables
        universals: Universal variables
    """

    def __init__(
        self,
        initial_globals: Optional[Mapping[str, object]] = None,
        initial_universals: Optional[Mapping[str, object]] = None,
        exported: Optional[Iterable[str]] = None,
    ):
        """Initialize the store.

        Args:
            initial_globals: Global variables to preload; a string value
                becomes a one-element array
            initial_universals: Universal variables to preload
            exported: Names of preloaded variables to mark as exported
        """
        self.local_scopes: List[Dict[str, Variable]] = [{}]
        self.globals: Dict[str, Variable] = {}
        self.universals: Dict[str, Variable] = {}

        exported_names = set(exported or ())
        for table, initial in ((self.globals, initial_globals),
                               (self.universals, initial_universals)):
            for name, value in (initial or {}).items():
                values = [value] if isinstance(value, str) else list(value)
                table[name] = Variable(values, exported=name in exported_names)

    def _tables(self, scope: Optional[Scope]) -> List[Dict[str, Variable]]:
        """Tables to search for a scope, in lookup order."""
        if scope is Scope.LOCAL:
            return list(reversed(self.local_scopes))
        if scope is Scope.GLOBAL:
            return [self.globals]
        if scope is Scope.UNIVERSAL:
            return [self.universals]
        return list(reversed(self.local_scopes)) + [self.globals, self.universals]

    def _find(self, name: str, scope: Optional[Scope]) -> Optional[Dict[str, Variable]]:
        for table in self._tables(scope):
            if name in table:
                return table
        return None

    def _write_table(self, name: str, scope: Optional[Scope]) -> Dict[str, Variable]:
        if scope is Scope.LOCAL:
            return self.local_scopes[-1]
        if scope is Scope.GLOBAL:
            return self.globals
        if scope is Scope.UNIVERSAL:
            return self.universals

        table = self._find(name, None)
        if table is not None:
            return table
        if len(self.local_scopes) > 1:
            return self.local_scopes[-1]
        return self.globals

    def get(self, name: str, scope: Optional[Scope] = None) -> Optional[List[str]]:
        """Get a copy of a variable's elements.

        Args:
            name: Variable name
            scope: Scope to look in, or None for the default lookup order

        Returns:
            The elements, or None if the variable is not set
        """
        table = self._find(name, scope)
        if table is None:
            return None
        return list(table[name].values)

    def exists(self, name: str, scope: Optional[Scope] = None) -> bool:
        """Check whether a variable is set in the given scope."""
        return self._find(name, scope) is not None

    def is_exported(self, name: str, scope: Optional[Scope] = None) -> bool:
        """Check whether the variable visible in the given scope is exported."""
        table = self._find(name, scope)
        return table is not None and table[name].exported

    def set(
        self,
        name: str,
        values: List[str],
        scope: Optional[Scope] = None,
        export: ExportMode = ExportMode.UNSPECIFIED,
    ) -> SetResult:
        """Set a variable to the given elements.

        Args:
            name: Variable name
            values: New elements; an empty list sets a zero-element variable
            scope: Target scope, or None for the default rule
            export: Export modifier; UNSPECIFIED keeps the current flag

        Returns:
            SetResult.OK, or the reason the write was rejected
        """
        if name in READ_ONLY_VARIABLES:
            return SetResult.PERMISSION_DENIED
        if name in GLOBAL_ONLY_VARIABLES and scope in (Scope.LOCAL, Scope.UNIVERSAL):
            return SetResult.WRONG_SCOPE
        validator = VALUE_VALIDATORS.get(name)
        if validator is not None and not validator(values):
            return SetResult.INVALID_VALUE

        table = self._write_table(name, scope)
        existing = table.get(name)
        if export is ExportMode.EXPORT:
            exported = True
        elif export is ExportMode.UNEXPORT:
            exported = False
        else:
            exported = existing.exported if existing is not None else False

        table[name] = Variable(list(values), exported=exported)
        logger.debug("set %s (%d elements, exported=%s)", name, len(values), exported)
        return SetResult.OK

    def remove(self, name: str, scope: Optional[Scope] = None) -> RemoveResult:
        """Remove a variable from the first table that holds it.

        Args:
            name: Variable name
            scope: Scope to remove from, or None for the default lookup order

        Returns:
            RemoveResult.OK, NOT_FOUND, or PERMISSION_DENIED for read-only names
        """
        if name in READ_ONLY_VARIABLES:
            return RemoveResult.PERMISSION_DENIED
        table = self._find(name, scope)
        if table is None:
            return RemoveResult.NOT_FOUND
        del table[name]
        logger.debug("removed %s", name)
        return RemoveResult.OK

    def list_names(self, scope: Optional[Scope] = None) -> Set[str]:
        """Names of all variables visible in the given scope."""
        names: Set[str] = set()
        for table in self._tables(scope):
            names.update(table)
        return names

    def push_scope(self) -> None:
        """Push a new local variable scope onto the stack.

        This is typically called when entering a function or block.
        """
        self.local_scopes.append({})
        logger.debug("pushed local scope (depth %d)", len(self.local_scopes))

    def pop_scope(self) -> Dict[str, Variable]:
        """Pop the current local variable scope from the stack.

        Returns:
            The popped scope dictionary

        Raises:
            IndexError: If only the top-level scope is left
        """
        if len(self.local_scopes) <= 1:
            raise IndexError("Cannot pop the top-level scope")
        return self.local_scopes.pop()
