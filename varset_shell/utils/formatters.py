"""
Formatting helpers for displaying variable names and values.

This module provides:
- escape_string: backslash-escape a string so it can be pasted back into a script
- expand_escape_variable: render a whole array for display
- shorten: truncate long display strings with an ellipsis
"""

from typing import List

ELLIPSIS = '…'

# Control characters with a dedicated escape
_CONTROL_ESCAPES = {
    '\n': '\\n',
    '\t': '\\t',
    '\r': '\\r',
    '\b': '\\b',
    '\x1b': '\\e',
}

# Characters the shell would otherwise interpret
_SPECIAL_CHARS = set(' &$()<>[]{};?*|~#"\'%\\^`!')

# Characters that cannot appear inside single quotes as-is
_UNQUOTABLE_CHARS = set('\n\t\r\b\x1b\\\'')


def escape_string(value: str, quoted: bool = True) -> str:
    """
    Escape a string for display.

    Args:
        value: The string to escape
        quoted: If True, an empty string is shown as ''

    Returns:
        Escaped string

    Example:
        >>> escape_string("a b")
        'a\\\\ b'
        >>> escape_string("")
        "''"
    """
    if not value:
        return "''" if quoted else ''

    out = []
    for ch in value:
        if ch in _CONTROL_ESCAPES:
            out.append(_CONTROL_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7f:
            out.append(f'\\x{ord(ch):02x}')
        elif ch in _SPECIAL_CHARS:
            out.append('\\' + ch)
        else:
            out.append(ch)
    return ''.join(out)


def _is_quotable(value: str) -> bool:
    return not any(ch in _UNQUOTABLE_CHARS for ch in value)


def expand_escape_variable(values: List[str]) -> str:
    """
    Render an array variable the way `set` prints it.

    Elements are single-quoted when that is enough to make them safe,
    otherwise backslash-escaped, and joined with two spaces.

    Example:
        >>> expand_escape_variable(["a b", "c"])
        "'a b'  'c'"
    """
    if not values:
        return ''

    if len(values) == 1:
        el = values[0]
        if ' ' in el and _is_quotable(el):
            return f"'{el}'"
        return escape_string(el)

    parts = []
    for el in values:
        if _is_quotable(el):
            parts.append(f"'{el}'")
        else:
            parts.append(escape_string(el))
    return '  '.join(parts)


def shorten(text: str, threshold: int = 64, keep: int = 60) -> str:
    """
    Truncate text longer than threshold to keep characters plus an ellipsis.

    Example:
        >>> shorten("x" * 70, threshold=64, keep=60) == "x" * 60 + ELLIPSIS
        True
    """
    if len(text) > threshold:
        return text[:keep] + ELLIPSIS
    return text


__all__ = [
    'ELLIPSIS',
    'escape_string',
    'expand_escape_variable',
    'shorten',
]
