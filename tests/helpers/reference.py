"""Reference arithmetic on the standard library decimal module.

The precision is far above anything the sampled operands can produce, so
every reference result is exact.
"""

from decimal import Context, Decimal

_EXACT = Context(prec=500)


def reference(op: str, a: str, b: str) -> Decimal:
    """Exact ``a op b`` for op in ``+ - *``."""
    x, y = Decimal(a), Decimal(b)
    if op == "+":
        return _EXACT.add(x, y)
    if op == "-":
        return _EXACT.subtract(x, y)
    if op == "*":
        return _EXACT.multiply(x, y)
    raise ValueError(f"Unknown operator: {op}")
