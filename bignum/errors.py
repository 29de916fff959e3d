"""Error classes for bignum.

Construction from text is the only place the number type can fail; the
calculator layers add their own expression errors on top.
"""


class BigNumError(Exception):
    """Base error for bignum operations."""

    pass


class FormatError(BigNumError, ValueError):
    """String does not match the decimal grammar ``-?[0-9]+(.[0-9]*)?``."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"Not a decimal number: {text!r}")


class ExpressionError(BigNumError):
    """Calculator expression is malformed."""

    pass


class UnsupportedOperationError(ExpressionError):
    """Operator is recognised but not offered (division, powers, modulo)."""

    pass
