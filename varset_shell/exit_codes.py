"""Exit status values shared by builtins."""

EXIT_CODE_OK = 0

# Generic failure of a command
EXIT_CODE_ERROR = 1

# Bad options or option combinations
EXIT_CODE_INVALID_ARGS = 2
