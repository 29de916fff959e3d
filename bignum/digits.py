"""Schoolbook digit arithmetic on decimal digit sequences.

Digits are stored as tuples of ints in the range 0-9, most significant
first. A magnitude is a pair ``(integer, fraction)`` of such tuples, and a
signed value adds a ``sign`` flag where ``True`` means non-negative.

Text only appears at the boundary (``parse`` and ``render``); everything in
between works on small ints so that carries and borrows never round-trip
through characters.
"""

from __future__ import annotations

import re

from bignum.errors import FormatError

__all__ = [
    # Types
    "Digits",
    "ZERO",
    # Text boundary
    "DECIMAL_PATTERN",
    "parse",
    "render",
    # Normalization
    "normalize",
    # Alignment and ordering
    "align",
    "compare_magnitudes",
    # Schoolbook operations
    "add_magnitudes",
    "subtract_magnitudes",
    "multiply_by_digit",
    "shift_point",
]

Digits = tuple[int, ...]

# ASCII digits only: \d would also accept other Unicode decimal digits
DECIMAL_PATTERN = re.compile(r"(-?)([0-9]+)(?:\.([0-9]*))?")

ZERO: Digits = (0,)


# =============================================================================
# Text boundary
# =============================================================================


def parse(text: str) -> tuple[bool, Digits, Digits]:
    """Parse a decimal string into a normalized ``(sign, integer, fraction)``.

    Args:
        text: String matching ``-?[0-9]+(.[0-9]*)?``

    Returns:
        Canonical triple; zero always comes back non-negative.

    Raises:
        FormatError: If text is not a str or does not match the grammar
    """
    if not isinstance(text, str):
        raise FormatError(text)
    match = DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text)

    minus, integer, fraction = match.groups()
    return normalize(
        minus != "-",
        tuple(int(c) for c in integer),
        tuple(int(c) for c in fraction or ""),
    )


def render(sign: bool, integer: Digits, fraction: Digits) -> str:
    """Render a normalized triple as its canonical string."""
    text = "".join(map(str, integer))
    if fraction:
        text += "." + "".join(map(str, fraction))
    return text if sign else "-" + text


# =============================================================================
# Normalization
# =============================================================================


def normalize(sign: bool, integer: Digits, fraction: Digits) -> tuple[bool, Digits, Digits]:
    """Strip insignificant zeros and canonicalize the sign of zero.

    Leading zeros are removed from the integer part (collapsing to ``(0,)``)
    and trailing zeros from the fraction. A zero result is forced
    non-negative, however much zero padding the raw digits carried.
    """
    start = 0
    while start < len(integer) and integer[start] == 0:
        start += 1
    integer = integer[start:] or ZERO

    end = len(fraction)
    while end > 0 and fraction[end - 1] == 0:
        end -= 1
    fraction = fraction[:end]

    if integer == ZERO and not fraction:
        sign = True
    return sign, integer, fraction


# =============================================================================
# Alignment and ordering
# =============================================================================


def align(
    a_int: Digits, a_frac: Digits, b_int: Digits, b_frac: Digits
) -> tuple[Digits, Digits, Digits, Digits]:
    """Zero-pad two magnitudes to equal integer and fraction lengths.

    Integer parts are padded on the left, fractions on the right. The
    inputs are left untouched; padded copies are returned.
    """
    int_len = max(len(a_int), len(b_int))
    frac_len = max(len(a_frac), len(b_frac))
    return (
        (0,) * (int_len - len(a_int)) + a_int,
        a_frac + (0,) * (frac_len - len(a_frac)),
        (0,) * (int_len - len(b_int)) + b_int,
        b_frac + (0,) * (frac_len - len(b_frac)),
    )


def compare_magnitudes(a_int: Digits, a_frac: Digits, b_int: Digits, b_frac: Digits) -> int:
    """Three-way comparison of two unsigned magnitudes.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    a_int, a_frac, b_int, b_frac = align(a_int, a_frac, b_int, b_frac)
    for x, y in zip(a_int + a_frac, b_int + b_frac):
        if x != y:
            return 1 if x > y else -1
    return 0


# =============================================================================
# Schoolbook operations
# =============================================================================


def add_magnitudes(
    a_int: Digits, a_frac: Digits, b_int: Digits, b_frac: Digits
) -> tuple[Digits, Digits]:
    """Add two magnitudes digit by digit.

    A single carry register runs right to left through the fraction and
    then across the point into the integer part. A carry left over after
    the most significant digit becomes a leading 1.

    Returns:
        Raw ``(integer, fraction)``; callers normalize.
    """
    a_int, a_frac, b_int, b_frac = align(a_int, a_frac, b_int, b_frac)
    frac_len = len(a_frac)
    a_stream = a_int + a_frac
    b_stream = b_int + b_frac

    out = []
    carry = 0
    for i in range(len(a_stream) - 1, -1, -1):
        total = a_stream[i] + b_stream[i] + carry
        if total > 9:
            total -= 10
            carry = 1
        else:
            carry = 0
        out.append(total)
    if carry:
        out.append(1)
    out.reverse()

    split = len(out) - frac_len
    return tuple(out[:split]), tuple(out[split:])


def subtract_magnitudes(
    big_int: Digits, big_frac: Digits, small_int: Digits, small_frac: Digits
) -> tuple[Digits, Digits]:
    """Subtract the smaller magnitude from the larger one digit by digit.

    The borrow propagates right to left across the point. The caller must
    pass the larger magnitude first; the result is then never negative.

    Returns:
        Raw ``(integer, fraction)``; callers normalize.
    """
    big_int, big_frac, small_int, small_frac = align(big_int, big_frac, small_int, small_frac)
    frac_len = len(big_frac)
    big = big_int + big_frac
    small = small_int + small_frac

    out = []
    borrow = 0
    for i in range(len(big) - 1, -1, -1):
        diff = big[i] - small[i] - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    out.reverse()

    split = len(out) - frac_len
    return tuple(out[:split]), tuple(out[split:])


def multiply_by_digit(multiplicand: Digits, digit: int, shift: int = 0) -> Digits:
    """Partial product of a digit string and a single digit.

    Args:
        multiplicand: Point-less digit string, most significant first
        digit: Multiplier digit (0-9)
        shift: Number of trailing zero placeholders for the digit's position

    Returns:
        Unnormalized product digits
    """
    out = []
    carry = 0
    for d in reversed(multiplicand):
        product = d * digit + carry
        carry, product = divmod(product, 10)
        out.append(product)
    while carry:
        carry, rest = divmod(carry, 10)
        out.append(rest)
    out.reverse()
    return tuple(out) + (0,) * shift


def shift_point(digits: Digits, places: int) -> tuple[Digits, Digits]:
    """Insert a decimal point ``places`` digits from the right.

    Products shorter than ``places`` are left-padded with zeros first, so
    ``shift_point((1,), 4)`` is ``0.0001``.
    """
    if places <= 0:
        return digits, ()
    if len(digits) <= places:
        digits = (0,) * (places - len(digits) + 1) + digits
    return digits[:-places], digits[-places:]
