"""
Parser for slice expressions of the form ``name[i j k..l ...]``.

Indexes are 1-based. Negative indexes count from the end of the array
(``-1`` is the last element) and are resolved against the array length
passed in by the caller. ``a..b`` expands to an inclusive range, counting
down when ``b < a``.

Example:
    >>> parse_index("foo[1 -1 3..2]", "foo", 5).indexes
    [1, 5, 3, 2]
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .exceptions import (
    EmptyIndexError,
    IndexCountMismatchError,
    IndexParseError,
    InvalidIndexError,
    ShellError,
    UnterminatedIndexError,
    VariableNameMismatchError,
)


@dataclass
class IndexParseResult:
    """
    Result of parsing one slice token.

    Exactly one of ``indexes`` (on success) or ``error`` is meaningful.

    Attributes:
        indexes: Resolved 1-based indexes, in the order written
        error: The failure, if parsing did not succeed
    """

    indexes: List[int] = field(default_factory=list)
    error: Optional[ShellError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[int]:
        """Return the indexes, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.indexes


# Indexes are limited to the range of a C long
INDEX_MIN = -2 ** 63
INDEX_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r'[+-]?[0-9]+')


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_int(text: str, pos: int) -> Optional[Tuple[int, int]]:
    """
    Read a signed decimal integer starting at pos.

    Leading whitespace is skipped. Returns (value, end), or None when no
    ASCII digits are present or the value does not fit in a C long.
    """
    match = _INT_RE.match(text, _skip_space(text, pos))
    if match is None:
        return None
    value = int(match.group())
    if not INDEX_MIN <= value <= INDEX_MAX:
        return None
    return value, match.end()


def _resolve(index: int, length: int) -> int:
    if index < 0:
        return length + index + 1
    return index


def split_slice(token: str) -> Tuple[str, bool]:
    """
    Split a destination token into its variable name and a slice flag.

    Example:
        >>> split_slice("PATH[2]")
        ('PATH', True)
    """
    bracket = token.find('[')
    if bracket == -1:
        return token, False
    return token[:bracket], True


def parse_index(token: str, name: str, length: int,
                strict_ranges: bool = False) -> IndexParseResult:
    """
    Parse the indexes of a slice token.

    Args:
        token: Raw token, e.g. ``foo[1 3..5]``
        name: Variable the command is operating on; the token must use it
        length: Current number of elements in that variable
        strict_ranges: If True, a range with a missing or malformed upper
            bound is an error. Otherwise the lower bound is kept and the
            rest of the token is ignored.

    Only ASCII digits are accepted and every number must fit in a C long.
    Empty brackets are an error.

    Returns:
        IndexParseResult holding either the indexes or the error
    """
    pos = 0
    while pos < len(token) and _is_name_char(token[pos]):
        pos += 1

    if pos >= len(token) or token[pos] != '[':
        return IndexParseResult(error=IndexCountMismatchError())

    found = token[:pos]
    if found != name:
        return IndexParseResult(error=VariableNameMismatchError(expected=name, found=found))

    indexes: List[int] = []
    pos = _skip_space(token, pos + 1)

    while True:
        if pos >= len(token):
            return IndexParseResult(error=UnterminatedIndexError(token))
        if token[pos] == ']':
            break

        parsed = _read_int(token, pos)
        if parsed is None:
            return IndexParseResult(error=InvalidIndexError(token[pos:]))
        lower, pos = parsed
        lower = _resolve(lower, length)

        if token.startswith('..', pos):
            upper_parsed = _read_int(token, pos + 2)
            if upper_parsed is None:
                if strict_ranges:
                    return IndexParseResult(error=InvalidIndexError(token[pos + 2:]))
                indexes.append(lower)
                return IndexParseResult(indexes=indexes)
            upper, pos = upper_parsed
            upper = _resolve(upper, length)
            step = -1 if upper < lower else 1
            indexes.extend(range(lower, upper + step, step))
        else:
            indexes.append(lower)

        end = _skip_space(token, pos)
        if end == pos and end < len(token) and token[end] != ']':
            # Something other than whitespace or ']' directly after a number
            return IndexParseResult(error=InvalidIndexError(token[end:]))
        pos = end

    if not indexes:
        return IndexParseResult(error=EmptyIndexError(token))
    return IndexParseResult(indexes=indexes)


def parse_indexes(tokens: List[str], name: str, length: int,
                  strict_ranges: bool = False) -> List[int]:
    """
    Parse several slice tokens for the same variable.

    Raises:
        IndexParseError, IndexCountMismatchError: On the first bad token
    """
    indexes: List[int] = []
    for token in tokens:
        indexes.extend(parse_index(token, name, length, strict_ranges).unwrap())
    return indexes


__all__ = [
    'IndexParseResult',
    'IndexParseError',
    'split_slice',
    'parse_index',
    'parse_indexes',
]
