"""bignum - exact arbitrary-precision decimal arithmetic."""

from bignum.errors import BigNumError, ExpressionError, FormatError, UnsupportedOperationError
from bignum.number import D, DecimalValue

__version__ = "0.1.0"
__all__ = [
    # Values
    "DecimalValue",
    "D",
    # Errors
    "BigNumError",
    "FormatError",
    "ExpressionError",
    "UnsupportedOperationError",
    "__version__",
]
