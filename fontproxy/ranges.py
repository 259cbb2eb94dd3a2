"""
Unicode range algebra over half-open code point intervals.

``unicode-range`` values are parsed into ``[begin, end)`` integer pairs,
reduced with interval subtraction, and serialized back to CSS syntax.

License: MIT
"""

import re
from typing import List, Tuple

from fontproxy.exceptions import UnicodeRangeError

Interval = Tuple[int, int]

TOKEN_PATTERN = re.compile(r"U\+([0-9a-f?]+)(?:-([0-9a-f]+))?", re.IGNORECASE)


def _parse_hex(value: str, token: str) -> int:
    try:
        return int(value, 16)
    except ValueError:
        raise UnicodeRangeError(f"Invalid unicode-range token: {token!r}") from None


def _parse_token(token: str) -> Interval:
    match = TOKEN_PATTERN.fullmatch(token)
    if match is None:
        raise UnicodeRangeError(f"Invalid unicode-range token: {token!r}")

    first, last = match.groups()
    if '?' in first:
        if last is not None:
            raise UnicodeRangeError(f"Invalid unicode-range token: {token!r}")
        # Wildcard form, e.g. U+4?? covers U+400-4FF
        begin = _parse_hex(first.replace('?', '0'), token)
        return begin, _parse_hex(first.replace('?', 'f'), token) + 1

    begin = _parse_hex(first, token)
    if last is not None:
        return begin, _parse_hex(last, token) + 1
    return begin, begin + 1


def parse_range(text: str) -> List[Interval]:
    """
    Parse a comma-separated ``unicode-range`` value.

    Args:
        text: Range list such as ``"U+0-FF, U+131, U+2000-206F"``

    Returns:
        Intervals in token order; ``U+41`` becomes ``(0x41, 0x42)``

    Raises:
        UnicodeRangeError: If a token is not valid hexadecimal
    """
    return [_parse_token(token.strip()) for token in text.split(',') if token.strip()]


def subtract_range(lhs: List[Interval], rhs: List[Interval]) -> List[Interval]:
    """
    Remove every interval of ``rhs`` from ``lhs``.

    Each ``rhs`` interval is applied to the result of the previous one, so
    overlapping removals compound.
    """
    result = list(lhs)
    for begin, end in rhs:
        remaining: List[Interval] = []
        for b, e in result:
            if e <= begin or end <= b:
                remaining.append((b, e))
                continue
            if b < begin:
                remaining.append((b, begin))
            if end < e:
                remaining.append((end, e))
        result = remaining
    return result


def generate_range(intervals: List[Interval]) -> str:
    """Serialize intervals as a ``unicode-range`` value with lowercase hex."""
    return ", ".join(
        f"U+{begin:x}" if end - begin == 1 else f"U+{begin:x}-{end - 1:x}"
        for begin, end in intervals
    )
