"""String helpers used to break command lines and search paths apart."""

from __future__ import annotations

from itertools import zip_longest

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    """Reduce an integer to a signed 32-bit value, wrapping on overflow."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Read a leading decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    magnitude = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * magnitude)


def format_int(number: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"{number} does not fit in a signed 32-bit integer")
    return str(number)


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    index = haystack[: max(limit, 0)].find(needle)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters, like ``strncmp``.

    Returns 0 when equal, otherwise the difference between the code points
    of the first differing characters; a shorter string counts as ending
    with a zero character.
    """
    if limit <= 0:
        return 0
    pairs = zip_longest(first[:limit], second[:limit], fillvalue="\0")
    for left, right in pairs:
        if left != right:
            return ord(left) - ord(right)
    return 0