"""varset-shell: the `set` builtin of a shell with local, global and universal variables."""

from .shell import Shell
from .variable_store import ExportMode, Scope, VariableStore

__version__ = "0.1.0"

__all__ = ['Shell', 'VariableStore', 'Scope', 'ExportMode']
