"""Directory checks for path-like variables such as PATH and CDPATH.

This module provides the PathValidator class which handles:
- Deciding which variables hold directory lists
- Checking that new absolute entries are searchable directories
- Producing per-entry warnings and hints for the entries that are not

An assignment fails only if values were given and none of them passed.
"""

import errno
import os
import stat
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

DEFAULT_PATH_VARIABLES = ("PATH", "CDPATH")


@dataclass
class PathValidationWarning:
    """A rejected entry of a path variable.

    Attributes:
        var_name: Variable being assigned
        path: The rejected entry
        reason: Text of the underlying OS error
        hint: Suggestion shown when the entry looks like a colon-joined list
    """

    var_name: str
    path: str
    reason: str
    hint: Optional[str] = None

    def format(self, command: str = "set") -> str:
        return f'{command}: Warning: ${self.var_name} entry "{self.path}" is not valid ({self.reason})'


@dataclass
class PathValidationResult:
    """Outcome of validating the values for one assignment.

    Attributes:
        values: The entries that were validated
        any_success: Whether at least one entry was accepted
        warnings: One warning per rejected entry
    """

    values: List[str] = field(default_factory=list)
    any_success: bool = False
    warnings: List[PathValidationWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.values or self.any_success


class PathValidator:
    """Validates entries assigned to path-like variables.

    Attributes:
        path_variables: Names of the variables that get validated
    """

    def __init__(self, path_variables: Iterable[str] = DEFAULT_PATH_VARIABLES):
        self.path_variables = frozenset(path_variables)

    def applies_to(self, var_name: str) -> bool:
        """Check whether assignments to var_name are validated."""
        return var_name in self.path_variables

    def check_directory(self, path: str) -> Optional[str]:
        """Check that path is a directory we may search.

        Returns:
            None if the directory is usable, else the OS error text
        """
        try:
            st = os.stat(path)
        except OSError as e:
            return e.strerror or str(e)

        if not stat.S_ISDIR(st.st_mode):
            return os.strerror(errno.ENOTDIR)

        if not os.access(path, os.X_OK):
            return os.strerror(errno.EACCES)

        return None

    def validate(self, var_name: str, values: List[str],
                 existing: Optional[List[str]] = None,
                 command: str = "set") -> PathValidationResult:
        """Validate the values about to be assigned to var_name.

        Relative entries and entries already present in the current value
        are accepted without touching the filesystem.

        Args:
            var_name: Variable being assigned
            values: New entries
            existing: Value currently visible for var_name (default lookup,
                not the scope being written), or None if unset
            command: Command name used in hints

        Returns:
            PathValidationResult with warnings for rejected entries
        """
        result = PathValidationResult(values=list(values))
        existing = existing or []

        for path in values:
            if not path.startswith('/') or path in existing:
                result.any_success = True
                continue

            reason = self.check_directory(path)
            if reason is None:
                result.any_success = True
                continue

            hint = None
            colon = path.find(':')
            if colon != -1 and path[colon + 1:]:
                rest = path[colon + 1:]
                hint = f"{command}: Did you mean '{command} {var_name} ${var_name} {rest}'?"

            result.warnings.append(PathValidationWarning(var_name, path, reason, hint))

        return result
