"""
xml_name.py - XML 1.0 ``Name`` recogniser
=========================================

Element tags and attribute keys in Unity markup must be well-formed XML 1.0
(Fourth Edition) names::

    Name          ::= NameStartChar (NameChar)*
    NameStartChar ::= ":" | [A-Z] | "_" | [a-z] | [#xC0-#xD6] | ...
    NameChar      ::= NameStartChar | "-" | "." | [0-9] | #xB7 | ...

Python ``str`` objects iterate by code point, so astral characters are
tested as a single value and never as a surrogate pair.

Public API
----------
is_valid_name(name) -> bool
    ``True`` iff *name* is a non-empty ``str`` matching ``Name``.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Any, Sequence, Tuple

__all__ = ["is_valid_name"]

# --------------------------------------------------------------------------- #
# Code-point tables (inclusive ranges, sorted, non-overlapping)               #
# --------------------------------------------------------------------------- #

_NAME_START_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x003A, 0x003A),  # ':'
    (0x0041, 0x005A),  # A-Z
    (0x005F, 0x005F),  # '_'
    (0x0061, 0x007A),  # a-z
    (0x00C0, 0x00D6),
    (0x00D8, 0x00F6),
    (0x00F8, 0x02FF),
    (0x0370, 0x037D),
    (0x037F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

_NAME_EXTRA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x002D, 0x002E),  # '-' '.'
    (0x0030, 0x0039),  # 0-9
    (0x00B7, 0x00B7),
    (0x0300, 0x036F),
    (0x203F, 0x2040),
)

_NAME_RANGES: Tuple[Tuple[int, int], ...] = tuple(
    sorted(_NAME_START_RANGES + _NAME_EXTRA_RANGES)
)

_NAME_START_LOWS = [lo for lo, _ in _NAME_START_RANGES]
_NAME_LOWS = [lo for lo, _ in _NAME_RANGES]

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _in_ranges(cp: int, lows: Sequence[int], ranges: Sequence[Tuple[int, int]]) -> bool:
    """Binary-search *ranges* for the code point *cp*."""
    idx = bisect_right(lows, cp) - 1
    return idx >= 0 and cp <= ranges[idx][1]


def _is_name_start_char(ch: str) -> bool:
    return _in_ranges(ord(ch), _NAME_START_LOWS, _NAME_START_RANGES)


def _is_name_char(ch: str) -> bool:
    return _in_ranges(ord(ch), _NAME_LOWS, _NAME_RANGES)

# --------------------------------------------------------------------------- #
# Public predicate                                                            #
# --------------------------------------------------------------------------- #

def is_valid_name(name: Any) -> bool:
    """Return ``True`` iff *name* is a well-formed XML 1.0 ``Name``.

    ``None``, the empty string and non-string values are rejected; the
    function never raises.
    """
    if not isinstance(name, str) or not name:
        return False
    if not _is_name_start_char(name[0]):
        return False
    return all(_is_name_char(ch) for ch in name[1:])
