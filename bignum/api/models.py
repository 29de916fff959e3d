"""Request and response models for the calculator API."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from bignum.errors import FormatError
from bignum.number import DecimalValue


def validate_decimal(value: Any) -> str:
    """Validate a decimal string and return its canonical form.

    Args:
        value: Value to validate (string or int)

    Returns:
        Canonical decimal string

    Raises:
        ValueError: If value is not a decimal matching ``-?[0-9]+(.[0-9]*)?``
    """
    # Accept int directly
    if isinstance(value, int) and not isinstance(value, bool):
        return str(DecimalValue.from_int(value))

    if not isinstance(value, str):
        raise ValueError(f"Decimal must be string or int, got {type(value).__name__}")

    try:
        return str(DecimalValue(value))
    except FormatError as err:
        raise ValueError(f"Decimal must match -?[0-9]+(.[0-9]*)?: '{value}'") from err


# Arbitrary-precision decimal as a canonical string (validated)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal),
    Field(description="Exact decimal number as a string"),
]


class Operation(str, Enum):
    """Operations offered by POST /compute."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    NEGATE = "negate"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    ABS = "abs"

    @property
    def is_binary(self) -> bool:
        return self in (Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY)


class EvaluateRequest(BaseModel):
    """Infix expression to evaluate."""

    expression: str = Field(min_length=1)


class EvaluateResponse(BaseModel):
    expression: str
    result: DecimalString


class ComputeRequest(BaseModel):
    """Single operation on one or two decimals.

    ``right`` is required for add, subtract and multiply and ignored
    otherwise.
    """

    operation: Operation
    left: DecimalString
    right: DecimalString | None = None

    @model_validator(mode="after")
    def check_operands(self) -> "ComputeRequest":
        if self.operation.is_binary and self.right is None:
            raise ValueError(f"Operation '{self.operation.value}' requires 'right'")
        return self


class ComputeResponse(BaseModel):
    operation: Operation
    result: DecimalString


class CompareRequest(BaseModel):
    left: DecimalString
    right: DecimalString


class CompareResponse(BaseModel):
    """Three-way comparison result: -1, 0 or 1."""

    result: Literal[-1, 0, 1]
