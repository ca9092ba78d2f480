"""
SET command - create, update, erase, query and display shell variables.
"""

import logging
import re
from typing import List, Tuple

from ..command_decorators import command
from ..exceptions import (
    EraseValuesError,
    IndexCountMismatchError,
    InvalidValueError,
    InvalidVariableNameError,
    MissingVariableNameError,
    PathValidationError,
    ReadOnlyVariableError,
    SliceNotAllowedError,
    WrongScopeError,
)
from ..exit_codes import EXIT_CODE_ERROR, EXIT_CODE_OK
from ..index_parser import parse_index, parse_indexes, split_slice
from ..process import Process
from ..scope_policy import OperationMode, ScopeDescriptor, SetFlags, resolve_policy
from ..slice_engine import erase_values, update_values
from ..utils.formatters import escape_string, expand_escape_variable, shorten
from ..variable_store import RemoveResult, Scope, SetResult
from . import register_command
from .base import parse_options, write_error

logger = logging.getLogger(__name__)

USAGE = "set [-lgU] [-xu] [-eqnSL] [name[index ...] [value ...]]"

HELP_TEXT = """\
set - display and change shell variables

Usage: set [options] [name[index ...] [value ...]]

Options:
  -l, --local      use the local scope
  -g, --global     use the global scope
  -U, --universal  use the universal scope
  -x, --export     export the variable
  -u, --unexport   do not export the variable
  -e, --erase      erase the variable or the given elements
  -q, --query      count how many of the given variables are missing
  -n, --names      list variable names only
  -S, --show       show a variable in every scope
  -L, --long       do not shorten long values
  -h, --help       show this help

Examples:
  set PATH /usr/local/bin $PATH
  set foo[2 3] b c
  set -e foo[1..2]
  set -q foo[4]
"""

# Values longer than this are shortened when listing all variables
SHORTEN_THRESHOLD = 64
SHORTEN_KEEP = 60

# Arrays longer than this have their middle elided by --show
SHOW_ELIDE_THRESHOLD = 100
SHOW_EDGE_COUNT = 50

SHORT_OPTIONS = {
    'l': 'local',
    'g': 'global_',
    'U': 'universal',
    'x': 'export',
    'u': 'unexport',
    'e': 'erase',
    'n': 'names',
    'q': 'query',
    'S': 'show',
    'L': 'long',
    'h': 'help',
}

LONG_OPTIONS = {
    'local': 'local',
    'global': 'global_',
    'universal': 'universal',
    'export': 'export',
    'unexport': 'unexport',
    'erase': 'erase',
    'names': 'names',
    'query': 'query',
    'show': 'show',
    'long': 'long',
    'help': 'help',
}

_VAR_NAME_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')

_STORE_ERRORS = {
    SetResult.PERMISSION_DENIED: ReadOnlyVariableError,
    SetResult.WRONG_SCOPE: WrongScopeError,
    SetResult.INVALID_VALUE: InvalidValueError,
}


def valid_var_name(name: str) -> bool:
    """Check that name is a valid variable identifier."""
    return bool(_VAR_NAME_RE.match(name))


def parse_set_flags(args: List[str], command_name: str = 'set') -> Tuple[SetFlags, List[str]]:
    """
    Parse the options of the set builtin.

    Returns:
        Tuple of (SetFlags, positional args)
    """
    options, positional = parse_options(args, SHORT_OPTIONS, LONG_OPTIONS, command_name)
    flags = SetFlags()
    for name in options:
        setattr(flags, name, True)
    return flags, positional


class VariableCommandDriver:
    """
    Runs one invocation of the set builtin in a resolved scope and mode.

    Attributes:
        process: The invoking process
        flags: Parsed option flags
        descriptor: Resolved scope and export mode
    """

    def __init__(self, process: Process, flags: SetFlags, descriptor: ScopeDescriptor,
                 strict_ranges: bool = False):
        self.process = process
        self.flags = flags
        self.descriptor = descriptor
        self.strict_ranges = strict_ranges
        self.store = process.context.store
        self.path_validator = process.context.path_validator

    @property
    def scope(self):
        return self.descriptor.scope

    def run(self, mode: OperationMode, args: List[str]) -> int:
        logger.debug("set: mode=%s scope=%s args=%r", mode.value, self.scope, args)
        if mode is OperationMode.SHOW:
            return self.show(args)
        if mode is OperationMode.QUERY:
            return self.query(args)
        if mode is OperationMode.LIST_NAMES:
            return self.list_names()
        if mode is OperationMode.ERASE:
            return self.erase(args)
        return self.assign(args)

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _out(self, text: str) -> None:
        self.process.stdout.write(text)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write_variable(self, name: str, values: List[str]) -> None:
        """
        Write values to name, validating path variables first.

        Raises:
            PathValidationError: If values were given and none are usable
            StoreError: If the store rejects the write
        """
        if self.path_validator.applies_to(name):
            # Baseline is the value visible by default, not the target scope
            existing = self.store.get(name)
            result = self.path_validator.validate(name, values, existing, self.process.command)
            for warning in result.warnings:
                write_error(self.process, warning.format(self.process.command),
                            prefix_command=False)
                if warning.hint:
                    write_error(self.process, warning.hint, prefix_command=False)
            if not result.ok:
                raise PathValidationError(name)

        status = self.store.set(name, values, self.scope, self.descriptor.export)
        if status is not SetResult.OK:
            raise _STORE_ERRORS[status](name)

    def _check_destination(self, token: str) -> Tuple[str, bool]:
        name, is_slice = split_slice(token)
        if not valid_var_name(name):
            raise InvalidVariableNameError(self.process.command, name)
        return name, is_slice

    def _collect_slice(self, name: str, args: List[str], length: int) -> Tuple[List[int], List[str]]:
        """
        Split args into the indexes of leading slice tokens and the values.

        Slice tokens are consumed until the number of remaining arguments
        equals the number of indexes collected so far.
        """
        indexes: List[int] = []
        for pos, token in enumerate(args):
            indexes.extend(parse_index(token, name, length, self.strict_ranges).unwrap())
            remaining = len(args) - pos - 1
            if remaining < len(indexes):
                break
            if remaining == len(indexes):
                return indexes, args[pos + 1:]
        raise IndexCountMismatchError(self.process.command)

    def _warn_if_shadowed(self, name: str) -> None:
        if (self.scope is Scope.UNIVERSAL and self.process.context.interactive
                and self.store.exists(name, Scope.GLOBAL)):
            write_error(
                self.process,
                f"Universal var '{name}' created but shadowed by global var of the same name."
            )

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def assign(self, args: List[str]) -> int:
        """Assign a whole variable or a slice of it; list variables if no args."""
        if not args:
            self.print_variables()
            return EXIT_CODE_OK

        name, is_slice = self._check_destination(args[0])

        if is_slice:
            current = self.store.get(name, self.scope) or []
            indexes, values = self._collect_slice(name, args, len(current))
            self.write_variable(name, update_values(current, indexes, values))
        else:
            self.write_variable(name, list(args[1:]))

        self._warn_if_shadowed(name)
        return EXIT_CODE_OK

    def erase(self, args: List[str]) -> int:
        """Erase a variable, or the given elements of it."""
        if not args:
            raise MissingVariableNameError(self.process.command)

        name, is_slice = self._check_destination(args[0])

        if is_slice:
            current = self.store.get(name, self.scope)
            if current is None:
                return EXIT_CODE_ERROR
            indexes = parse_indexes(args, name, len(current), self.strict_ranges)
            self.write_variable(name, erase_values(current, indexes))
            return EXIT_CODE_OK

        if len(args) > 1:
            raise EraseValuesError(self.process.command)

        result = self.store.remove(name, self.scope)
        if result is RemoveResult.PERMISSION_DENIED:
            raise ReadOnlyVariableError(name)
        if result is RemoveResult.NOT_FOUND:
            return EXIT_CODE_ERROR
        return EXIT_CODE_OK

    def query(self, args: List[str]) -> int:
        """Return the number of named variables or elements that do not exist."""
        missing = 0
        for arg in args:
            name, is_slice = split_slice(arg)
            if not is_slice:
                if not self.store.exists(name, self.scope):
                    missing += 1
                continue

            current = self.store.get(name, self.scope) or []
            indexes = parse_index(arg, name, len(current), self.strict_ranges).unwrap()
            missing += sum(1 for index in indexes if index < 1 or index > len(current))
        return missing

    def list_names(self) -> int:
        """Print the names visible in the resolved scope."""
        for name in sorted(self.store.list_names(self.scope)):
            self._out(escape_string(name) + "\n")
        return EXIT_CODE_OK

    def print_variables(self) -> None:
        """Print every visible variable with its value."""
        for name in sorted(self.store.list_names(self.scope)):
            line = escape_string(name)
            values = self.store.get(name, self.scope)
            if values:
                display = expand_escape_variable(values)
                if not self.flags.long:
                    display = shorten(display, SHORTEN_THRESHOLD, SHORTEN_KEEP)
                line += " " + display
            self._out(line + "\n")

    def show(self, args: List[str]) -> int:
        """Describe the named variables (or all of them) in every scope."""
        if any('[' in arg for arg in args):
            raise SliceNotAllowedError(self.process.command)

        names = args if args else sorted(self.store.list_names())
        for name in names:
            if not valid_var_name(name):
                write_error(self.process, f"${name}: invalid var name", prefix_command=False)
                continue

            for scope in (Scope.LOCAL, Scope.GLOBAL, Scope.UNIVERSAL):
                self._show_scope(name, scope)
            self._out("\n")

        return EXIT_CODE_OK

    def _show_scope(self, name: str, scope: Scope) -> None:
        values = self.store.get(name, scope)
        if values is None:
            self._out(f"${name}: not set in {scope.value} scope\n")
            return

        exported = "exported" if self.store.is_exported(name, scope) else "unexported"
        self._out(
            f"${name}: set in {scope.value} scope, {exported}, with {len(values)} elements\n"
        )

        elide = len(values) > SHOW_ELIDE_THRESHOLD
        for i, value in enumerate(values):
            if elide:
                if i == SHOW_EDGE_COUNT:
                    self._out("...\n")
                if SHOW_EDGE_COUNT <= i < len(values) - SHOW_EDGE_COUNT:
                    continue
            escaped = escape_string(value, quoted=False)
            self._out(f"${name}[{i + 1}]: length={len(value)} value=|{escaped}|\n")


@register_command('set')
@command(usage=USAGE)
def cmd_set(process: Process) -> int:
    """
    Display and change shell variables

    Usage: set [options] [name[index ...] [value ...]]

    Examples:
        set foo a b c           # foo is now a three element array
        set foo[2] x            # replace the second element
        set -e foo[-1]          # erase the last element
        set -q foo bar          # status = number of unset names
        set -Ux EDITOR vim      # exported universal variable
    """
    incoming_status = process.context.last_status

    flags, args = parse_set_flags(process.args, process.command)
    if flags.help:
        process.stdout.write(HELP_TEXT)
        return EXIT_CODE_OK

    descriptor, mode = resolve_policy(flags, process.command)
    status = VariableCommandDriver(process, flags, descriptor).run(mode, args)

    if status == EXIT_CODE_OK and flags.preserves_status:
        return incoming_status
    return status
