"""
Auto-increment counter tokens.

Numeric tokens count in base 10. Alphabetic tokens behave like an
odometer over ``a..z`` (or ``A..Z``): the rightmost letter advances and
carries leftwards, and a full carry-out grows the token by one letter
(``z`` -> ``aa``, ``az`` -> ``ba``, ``zz`` -> ``aaa``).
"""

from __future__ import annotations

from hrc.core.levels import CounterKind


def advance_counter(token: str, kind: CounterKind) -> str:
    """Return the token following ``token`` for a counter of ``kind``.

    Args:
        token: Current counter value.
        kind: Counter alphabet.

    Returns:
        The next counter value.
    """
    if kind is CounterKind.NUMERIC:
        return _advance_numeric(token)
    if kind is CounterKind.ALPHA_LOWER:
        return _advance_alpha(token, upper=False)
    if kind is CounterKind.ALPHA_UPPER:
        return _advance_alpha(token, upper=True)
    return token


def _advance_numeric(token: str) -> str:
    # Unparsable tokens continue as if the counter were at 1
    try:
        number = int(token)
    except ValueError:
        number = 1
    return str(number + 1)


def _advance_alpha(token: str, upper: bool) -> str:
    min_char = "A" if upper else "a"
    max_char = "Z" if upper else "z"

    if not token:
        return min_char

    chars = list(token)
    index = len(chars) - 1
    carry = True

    while index >= 0 and carry:
        if chars[index] == max_char:
            chars[index] = min_char
            index -= 1
        else:
            chars[index] = chr(ord(chars[index]) + 1)
            carry = False

    if carry:
        chars.insert(0, min_char)
    return "".join(chars)
