"""Calculator front end for DecimalValue.

Two entry points share one evaluator:
- ``evaluate(expression)``: parse and compute an infix expression such as
  ``"(1.5 + 2) * -3"``
- ``Calculator``: a pocket-calculator register that applies operations to
  a running value

Grammar (``*`` binds tighter than ``+`` and ``-``):
    expression := term (("+" | "-") term)*
    term       := factor ("*" factor)*
    factor     := ("+" | "-")* (NUMBER | "(" expression ")")

Parentheses may nest at most MAX_NESTING_DEPTH levels deep.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import structlog

from bignum.errors import ExpressionError, UnsupportedOperationError
from bignum.number import DecimalValue

logger = structlog.get_logger()

__all__ = ["Token", "tokenize", "evaluate", "Calculator", "MAX_NESTING_DEPTH"]

# Unsigned literal; signs are handled as unary operators by the parser
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?")
_OPERATORS = frozenset("+-*()")
_UNSUPPORTED = frozenset("/%^")

# Deepest parenthesis nesting evaluate() accepts
MAX_NESTING_DEPTH = 200


@dataclass(frozen=True)
class Token:
    """A lexical token of a calculator expression."""

    kind: str  # "number" or "op"
    text: str
    position: int


def tokenize(expression: str) -> list[Token]:
    """Split an expression into number and operator tokens.

    Raises:
        UnsupportedOperationError: For division, modulo or power operators
        ExpressionError: For any other unexpected character
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(expression):
        char = expression[pos]
        if char.isspace():
            pos += 1
            continue
        match = _NUMBER.match(expression, pos)
        if match is not None:
            tokens.append(Token("number", match.group(), pos))
            pos = match.end()
        elif char in _OPERATORS:
            tokens.append(Token("op", char, pos))
            pos += 1
        elif char in _UNSUPPORTED:
            raise UnsupportedOperationError(f"Operator '{char}' is not supported (position {pos})")
        else:
            raise ExpressionError(f"Unexpected character {char!r} at position {pos}")
    return tokens


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.index = 0
        self.depth = 0

    def peek(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise ExpressionError("Unexpected end of expression")
        self.index += 1
        return token

    def parse(self) -> DecimalValue:
        if not self.tokens:
            raise ExpressionError("Empty expression")
        value = self.expression()
        trailing = self.peek()
        if trailing is not None:
            raise ExpressionError(
                f"Unexpected {trailing.text!r} at position {trailing.position}"
            )
        return value

    def expression(self) -> DecimalValue:
        value = self.term()
        while (token := self.peek()) is not None and token.text in ("+", "-"):
            self.advance()
            right = self.term()
            value = value + right if token.text == "+" else value - right
        return value

    def term(self) -> DecimalValue:
        value = self.factor()
        while (token := self.peek()) is not None and token.text == "*":
            self.advance()
            value = value * self.factor()
        return value

    def factor(self) -> DecimalValue:
        token = self.advance()
        # A run of unary signs folds into one sign
        negative = False
        while token.kind == "op" and token.text in ("+", "-"):
            if token.text == "-":
                negative = not negative
            token = self.advance()

        if token.kind == "number":
            value = DecimalValue(token.text)
        elif token.text == "(":
            if self.depth >= MAX_NESTING_DEPTH:
                raise ExpressionError(
                    f"Expression nested too deeply at position {token.position} "
                    f"(limit {MAX_NESTING_DEPTH})"
                )
            self.depth += 1
            value = self.expression()
            closing = self.peek()
            if closing is None or closing.text != ")":
                raise ExpressionError(f"Unbalanced '(' at position {token.position}")
            self.advance()
            self.depth -= 1
        else:
            raise ExpressionError(f"Unexpected {token.text!r} at position {token.position}")
        return -value if negative else value


def evaluate(expression: str) -> DecimalValue:
    """Evaluate an infix expression exactly.

    Args:
        expression: Expression over decimal literals, ``+ - *`` and parentheses

    Returns:
        The exact result

    Raises:
        ExpressionError: If the expression is malformed or nests parentheses
            deeper than MAX_NESTING_DEPTH
    """
    result = _Parser(tokenize(expression)).parse()
    logger.debug("expression_evaluated", expression=expression, result=str(result))
    return result


class Calculator:
    """Pocket-calculator register over DecimalValue.

    Every operation replaces the register with its result and returns it.
    Operands may be DecimalValue, int or a decimal string.

    Attributes:
        value: The current register contents (starts at zero)
    """

    def __init__(self, initial: DecimalValue | int | str = 0) -> None:
        self.value = _operand(initial)

    def _store(self, operation: str, result: DecimalValue) -> DecimalValue:
        logger.debug("calculator_operation", operation=operation, result=str(result))
        self.value = result
        return result

    def enter(self, operand: DecimalValue | int | str) -> DecimalValue:
        """Replace the register with a new value."""
        return self._store("enter", _operand(operand))

    def add(self, operand: DecimalValue | int | str) -> DecimalValue:
        return self._store("add", self.value + _operand(operand))

    def subtract(self, operand: DecimalValue | int | str) -> DecimalValue:
        return self._store("subtract", self.value - _operand(operand))

    def multiply(self, operand: DecimalValue | int | str) -> DecimalValue:
        return self._store("multiply", self.value * _operand(operand))

    def negate(self) -> DecimalValue:
        return self._store("negate", -self.value)

    def increment(self) -> DecimalValue:
        return self._store("increment", self.value.increment())

    def decrement(self) -> DecimalValue:
        return self._store("decrement", self.value.decrement())

    def clear(self) -> DecimalValue:
        """Reset the register to zero."""
        return self._store("clear", DecimalValue.zero())

    def evaluate(self, expression: str) -> DecimalValue:
        """Evaluate an expression and store its result."""
        return self._store("evaluate", evaluate(expression))


def _operand(x: DecimalValue | int | str) -> DecimalValue:
    if isinstance(x, DecimalValue):
        return x
    if isinstance(x, str):
        return DecimalValue(x)
    return DecimalValue.from_int(x)
