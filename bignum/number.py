"""Arbitrary-precision signed decimal values.

This module provides DecimalValue, an immutable exact decimal whose
arithmetic is carried out digit by digit (see ``bignum.digits``), so it is
bounded by neither machine word size nor floating-point rounding.

Usage pattern:
    from bignum.number import D

    total = D("0.1") + D("0.2")     # exactly 0.3
    area = D("12.5") * D("0.04")    # 0.5
    str(total - D("0.3"))           # "0"

Values support ``+ - *``, unary ``- + abs``, the six comparisons and
hashing. Plain ints are accepted as arithmetic operands and converted
exactly; comparisons are between DecimalValues only, which keeps ``hash``
(the hash of the canonical string) consistent with ``==``.
"""

from __future__ import annotations

from collections.abc import Callable

from bignum import digits
from bignum.digits import Digits

__all__ = ["DecimalValue", "D", "abs_sum", "abs_diff"]


class DecimalValue:
    """Exact signed decimal number.

    Stored as a sign flag plus separate integer and fraction digit tuples,
    always in canonical form: no leading integer zeros, no trailing
    fraction zeros, no negative zero.

    Attributes:
        sign: True for non-negative values (zero included)
        integer_digits: Integer part, most significant digit first
        fraction_digits: Fraction part, possibly empty
    """

    __slots__ = ("_sign", "_integer", "_fraction")
    _sign: bool
    _integer: Digits
    _fraction: Digits

    def __new__(cls, text: str) -> DecimalValue:
        """Parse a value from its decimal string.

        Values are built here, not in ``__init__``, so an existing instance
        cannot be re-parsed in place.

        Args:
            text: String matching ``-?[0-9]+(.[0-9]*)?``

        Raises:
            FormatError: If text does not match the grammar
        """
        return cls._from_parts(*digits.parse(text))

    @classmethod
    def _from_parts(cls, sign: bool, integer: Digits, fraction: Digits) -> DecimalValue:
        """Build a value from raw digits, normalizing them first."""
        value = object.__new__(cls)
        value._sign, value._integer, value._fraction = digits.normalize(sign, integer, fraction)
        return value

    def __reduce__(self) -> tuple[type[DecimalValue], tuple[str]]:
        """Pickle and copy through the canonical string."""
        return (type(self), (self.text,))

    @classmethod
    def from_str(cls, text: str) -> DecimalValue:
        """Parse DecimalValue from string.

        Raises:
            FormatError: If string is not a valid decimal
        """
        return cls(text)

    @classmethod
    def from_int(cls, value: int) -> DecimalValue:
        """Create an exact DecimalValue from an int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"DecimalValue.from_int requires int, got {type(value).__name__}")
        return cls(str(value))

    @classmethod
    def zero(cls) -> DecimalValue:
        """Create a DecimalValue with value 0."""
        return cls("0")

    @classmethod
    def one(cls) -> DecimalValue:
        """Create a DecimalValue with value 1."""
        return cls("1")

    # --- Read-only views ---

    @property
    def sign(self) -> bool:
        """True for non-negative values, False for negative ones."""
        return self._sign

    @property
    def integer_digits(self) -> Digits:
        """Integer part digits, most significant first (at least one)."""
        return self._integer

    @property
    def fraction_digits(self) -> Digits:
        """Fraction part digits, without trailing zeros (may be empty)."""
        return self._fraction

    @property
    def text(self) -> str:
        """Canonical string form."""
        return digits.render(self._sign, self._integer, self._fraction)

    def is_zero(self) -> bool:
        """True if the value is zero."""
        return self._integer == digits.ZERO and not self._fraction

    def is_negative(self) -> bool:
        """True if the value is below zero. Zero is never negative."""
        return not self._sign

    def is_integer(self) -> bool:
        """True if the value has no fraction digits."""
        return not self._fraction

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"DecimalValue({self.text!r})"

    def __hash__(self) -> int:
        return hash(self.text)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    # --- Comparison ---

    def compare(self, other: DecimalValue) -> int:
        """Three-way comparison with another value.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        if self._sign != other._sign:
            return 1 if self._sign else -1
        result = self.compare_abs(other)
        # Larger magnitudes are smaller numbers below zero
        return result if self._sign else -result

    def compare_abs(self, other: DecimalValue) -> int:
        """Three-way comparison of absolute values."""
        return digits.compare_magnitudes(
            self._integer, self._fraction, other._integer, other._fraction
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare(other) >= 0

    # --- Unary operations ---

    def __neg__(self) -> DecimalValue:
        """Flip the sign. Zero negates to itself."""
        if self.is_zero():
            return self
        return DecimalValue._from_parts(not self._sign, self._integer, self._fraction)

    def __pos__(self) -> DecimalValue:
        """Unary positive (returns self)."""
        return self

    def __abs__(self) -> DecimalValue:
        """Absolute value."""
        return self if self._sign else -self

    def increment(self) -> DecimalValue:
        """Return self + 1."""
        return self + DecimalValue.one()

    def decrement(self) -> DecimalValue:
        """Return self - 1."""
        return self - DecimalValue.one()

    # --- Arithmetic operations ---

    def __add__(self, other: DecimalValue | int) -> DecimalValue:
        """Exact sum. Sign comes from ADDITION_TABLE."""
        if not _is_operand(other):
            return NotImplemented
        return _apply_table(ADDITION_TABLE, self, _coerce(other))

    def __radd__(self, other: int) -> DecimalValue:
        if not _is_operand(other):
            return NotImplemented
        return _coerce(other) + self

    def __sub__(self, other: DecimalValue | int) -> DecimalValue:
        """Exact difference. Sign comes from SUBTRACTION_TABLE."""
        if not _is_operand(other):
            return NotImplemented
        return _apply_table(SUBTRACTION_TABLE, self, _coerce(other))

    def __rsub__(self, other: int) -> DecimalValue:
        if not _is_operand(other):
            return NotImplemented
        return _coerce(other) - self

    def __mul__(self, other: DecimalValue | int) -> DecimalValue:
        """Exact product by schoolbook long multiplication.

        The point-less digits of the shorter magnitude drive the loop. Each
        non-zero digit yields a shifted partial product of the longer one,
        and the partials are summed with ``+``. The point is put back
        ``f1 + f2`` digits from the right, where f1 and f2 are the operand
        fraction lengths.
        """
        if not _is_operand(other):
            return NotImplemented
        other = _coerce(other)

        left = self._integer + self._fraction
        right = other._integer + other._fraction
        if len(left) <= len(right):
            multiplier, multiplicand = left, right
        else:
            multiplier, multiplicand = right, left

        total = DecimalValue.zero()
        for position, digit in enumerate(reversed(multiplier)):
            if digit == 0:
                continue
            partial = digits.multiply_by_digit(multiplicand, digit, shift=position)
            total = total + DecimalValue._from_parts(True, partial, ())

        integer, fraction = digits.shift_point(
            total._integer, len(self._fraction) + len(other._fraction)
        )
        return DecimalValue._from_parts(self._sign == other._sign, integer, fraction)

    def __rmul__(self, other: int) -> DecimalValue:
        if not _is_operand(other):
            return NotImplemented
        return _coerce(other) * self


# =============================================================================
# Magnitude helpers
# =============================================================================


def abs_sum(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """|a| + |b| as a non-negative value."""
    integer, fraction = digits.add_magnitudes(a._integer, a._fraction, b._integer, b._fraction)
    return DecimalValue._from_parts(True, integer, fraction)


def abs_diff(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """||a| - |b|| as a non-negative value.

    The operand with the larger magnitude is always the minuend.
    """
    if a.compare_abs(b) < 0:
        a, b = b, a
    integer, fraction = digits.subtract_magnitudes(
        a._integer, a._fraction, b._integer, b._fraction
    )
    return DecimalValue._from_parts(True, integer, fraction)


# =============================================================================
# Sign resolution tables
# =============================================================================

# Key: (left is non-negative, right is non-negative, |left| compared to |right|)
# Value: (magnitude helper, result is non-negative)
# Equal magnitudes under abs_diff give zero, which normalizes non-negative.
SignTable = dict[
    tuple[bool, bool, int], tuple[Callable[[DecimalValue, DecimalValue], DecimalValue], bool]
]

ADDITION_TABLE: SignTable = {
    (True, True, 1): (abs_sum, True),
    (True, True, 0): (abs_sum, True),
    (True, True, -1): (abs_sum, True),
    (False, False, 1): (abs_sum, False),
    (False, False, 0): (abs_sum, False),
    (False, False, -1): (abs_sum, False),
    (True, False, 1): (abs_diff, True),
    (True, False, 0): (abs_diff, True),
    (True, False, -1): (abs_diff, False),
    (False, True, 1): (abs_diff, False),
    (False, True, 0): (abs_diff, True),
    (False, True, -1): (abs_diff, True),
}

SUBTRACTION_TABLE: SignTable = {
    (True, True, 1): (abs_diff, True),
    (True, True, 0): (abs_diff, True),
    (True, True, -1): (abs_diff, False),
    (False, False, 1): (abs_diff, False),
    (False, False, 0): (abs_diff, True),
    (False, False, -1): (abs_diff, True),
    (True, False, 1): (abs_sum, True),
    (True, False, 0): (abs_sum, True),
    (True, False, -1): (abs_sum, True),
    (False, True, 1): (abs_sum, False),
    (False, True, 0): (abs_sum, False),
    (False, True, -1): (abs_sum, False),
}


def _apply_table(table: SignTable, a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Look up the helper and result sign for ``a op b`` and apply them."""
    helper, non_negative = table[(a._sign, b._sign, a.compare_abs(b))]
    magnitude = helper(a, b)
    return magnitude if non_negative else -magnitude


def _is_operand(x: object) -> bool:
    """DecimalValue or plain int (bools excluded)."""
    return isinstance(x, DecimalValue) or (isinstance(x, int) and not isinstance(x, bool))


def _coerce(x: DecimalValue | int) -> DecimalValue:
    """Convert an int operand to DecimalValue; pass DecimalValue through."""
    if isinstance(x, DecimalValue):
        return x
    return DecimalValue.from_int(x)


# Convenience alias for concise code
D = DecimalValue
