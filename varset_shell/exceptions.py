"""
Custom exception hierarchy for varset-shell.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes
- Better error handling in commands

Usage:
    from varset_shell.exceptions import ShellError

    try:
        run_set(process)
    except ShellError as e:
        process.stderr.write(f"set: {e}\n")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import EXIT_CODE_ERROR, EXIT_CODE_INVALID_ARGS


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_CODE_ERROR):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised when parsing command input fails.
    """

    def __init__(self, message: str):
        super().__init__(message, exit_code=EXIT_CODE_ERROR)


class IndexParseError(ParsingError):
    """Base class for errors in a ``name[index ...]`` expression."""
    pass


class InvalidIndexError(IndexParseError):
    """
    Raised when an index is not a valid integer.

    Example:
        raise InvalidIndexError("x]")
    """

    def __init__(self, remainder: str):
        super().__init__(f"Invalid index starting at '{remainder}'")


class VariableNameMismatchError(IndexParseError):
    """
    Raised when a slice names a different variable than the one being set.

    Example:
        raise VariableNameMismatchError(expected="bar", found="foo")
    """

    def __init__(self, expected: str, found: str):
        super().__init__(
            f"Multiple variable names specified in single call ({expected} and {found})"
        )


class UnterminatedIndexError(IndexParseError):
    """Raised when the index list is not closed with ``]``."""

    def __init__(self, line: str):
        super().__init__(f"Unterminated index list in '{line}'")


class EmptyIndexError(IndexParseError):
    """Raised when the brackets of a slice hold no index."""

    def __init__(self, line: str):
        super().__init__(f"No index given in '{line}'")


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_CODE_ERROR):
        super().__init__(message, exit_code)
        self.command = command


class InvalidArgumentError(CommandError):
    """
    Raised when invalid arguments are provided to a command.

    Example:
        raise InvalidArgumentError("set", "-z")
    """

    def __init__(self, command: str, argument: str, message: Optional[str] = None):
        if message is None:
            message = f"Unknown option '{argument}'"
        super().__init__(command, message, exit_code=EXIT_CODE_INVALID_ARGS)
        self.argument = argument


class InvalidVariableNameError(CommandError):
    """
    Raised when a destination is not a valid identifier.

    Example:
        raise InvalidVariableNameError("set", "1abc")
    """

    def __init__(self, command: str, name: str):
        message = f"Variable name '{name}' is not valid. See `help identifiers`."
        super().__init__(command, message, exit_code=EXIT_CODE_INVALID_ARGS)
        self.name = name


class ArgumentCountError(CommandError):
    """Base class for errors about the number or combination of arguments."""
    pass


class IndexCountMismatchError(ArgumentCountError):
    """Raised when the number of indexes does not match the number of values."""

    def __init__(self, command: str = "set"):
        message = "The number of variable indexes does not match the number of values"
        super().__init__(command, message)


class EraseValuesError(ArgumentCountError):
    """Raised when values are passed along with ``--erase``."""

    def __init__(self, command: str = "set"):
        super().__init__(command, "Values cannot be specified with erase")


class MissingVariableNameError(ArgumentCountError):
    """Raised when ``--erase`` is given without a variable name."""

    def __init__(self, command: str = "set"):
        super().__init__(command, "Erase needs a variable name", exit_code=EXIT_CODE_INVALID_ARGS)


class OptionConflictError(ArgumentCountError):
    """
    Raised when mutually exclusive options are combined.

    Example:
        raise OptionConflictError("set", "Invalid combination of options")
    """

    def __init__(self, command: str, details: str):
        super().__init__(command, details, exit_code=EXIT_CODE_INVALID_ARGS)


class SliceNotAllowedError(CommandError):
    """Raised when ``--show`` is given a sliced variable name."""

    def __init__(self, command: str = "set"):
        super().__init__(command, "`set --show` does not allow slices with the var names")


# =============================================================================
# Bounds Errors
# =============================================================================

class ArrayBoundsError(ShellError):
    """
    Raised when an update targets an index below 1.

    Example:
        raise ArrayBoundsError(0)
    """

    def __init__(self, index: int):
        super().__init__("Array index out of bounds", exit_code=EXIT_CODE_ERROR)
        self.index = index


# =============================================================================
# Store Errors
# =============================================================================

class StoreError(ShellError):
    """
    Base class for writes rejected by the variable store.

    Attributes:
        var_name: The variable the write was aimed at
    """

    def __init__(self, var_name: str, message: str):
        super().__init__(message, exit_code=EXIT_CODE_ERROR)
        self.var_name = var_name


class ReadOnlyVariableError(StoreError):
    """Raised when a read-only variable is written."""

    def __init__(self, var_name: str):
        super().__init__(var_name, f"Tried to change the read-only variable '{var_name}'")


class WrongScopeError(StoreError):
    """Raised when a special variable is written in a scope it cannot live in."""

    def __init__(self, var_name: str):
        super().__init__(
            var_name, f"Tried to set the special variable '{var_name}' with the wrong scope"
        )


class InvalidValueError(StoreError):
    """Raised when a special variable is given a value it does not accept."""

    def __init__(self, var_name: str):
        super().__init__(
            var_name, f"Tried to set the special variable '{var_name}' to an invalid value"
        )


class PathValidationError(StoreError):
    """Raised when none of the entries given to a path variable are usable."""

    def __init__(self, var_name: str):
        super().__init__(var_name, f"No valid entries given for ${var_name}")
