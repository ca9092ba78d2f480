"""
Builtin command registry.

Command modules register their entry points with @register_command; call
load_all_commands() once to import every module in this package.
"""

import importlib
import pkgutil
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

_loaded = False


def register_command(name: str) -> Callable:
    """
    Register a function as the builtin called name.

    Example:
        @register_command('set')
        def cmd_set(process): ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func

    return decorator


def load_all_commands() -> None:
    """Import all command modules so they register themselves."""
    global _loaded
    if _loaded:
        return

    for module_info in pkgutil.iter_modules(__path__):
        if module_info.name == 'base':
            continue
        importlib.import_module(f"{__name__}.{module_info.name}")

    _loaded = True
