"""API endpoints for the calculator."""

import os
from collections.abc import Callable

import structlog
from fastapi import APIRouter, HTTPException

from bignum.api.models import (
    CompareRequest,
    CompareResponse,
    ComputeRequest,
    ComputeResponse,
    EvaluateRequest,
    EvaluateResponse,
    Operation,
)
from bignum.calculator import evaluate as evaluate_expression
from bignum.number import DecimalValue

logger = structlog.get_logger()

router = APIRouter()

# Longest expression accepted by POST /evaluate
# Configurable via environment variable BIGNUM_MAX_EXPRESSION_LENGTH
MAX_EXPRESSION_LENGTH = int(os.environ.get("BIGNUM_MAX_EXPRESSION_LENGTH", "10000"))

UNARY_OPERATIONS: dict[Operation, Callable[[DecimalValue], DecimalValue]] = {
    Operation.NEGATE: lambda x: -x,
    Operation.INCREMENT: lambda x: x.increment(),
    Operation.DECREMENT: lambda x: x.decrement(),
    Operation.ABS: abs,
}

BINARY_OPERATIONS: dict[Operation, Callable[[DecimalValue, DecimalValue], DecimalValue]] = {
    Operation.ADD: lambda x, y: x + y,
    Operation.SUBTRACT: lambda x, y: x - y,
    Operation.MULTIPLY: lambda x, y: x * y,
}


@router.post("/evaluate")
async def evaluate(request: EvaluateRequest) -> EvaluateResponse:
    """Evaluate an infix expression.

    Error Handling:
        - Expression longer than MAX_EXPRESSION_LENGTH: 422
        - Malformed expression: 400 (ExpressionError handler in main)
    """
    if len(request.expression) > MAX_EXPRESSION_LENGTH:
        logger.warning(
            "expression_too_long",
            length=len(request.expression),
            max_length=MAX_EXPRESSION_LENGTH,
        )
        raise HTTPException(
            status_code=422,
            detail=f"Expression exceeds {MAX_EXPRESSION_LENGTH} characters",
        )

    result = evaluate_expression(request.expression)
    logger.info("evaluated", expression_length=len(request.expression), result=str(result))
    return EvaluateResponse(expression=request.expression, result=str(result))


@router.post("/compute")
async def compute(request: ComputeRequest) -> ComputeResponse:
    """Apply a single operation to one or two decimals."""
    left = DecimalValue(request.left)
    if request.operation.is_binary:
        assert request.right is not None  # enforced by ComputeRequest
        result = BINARY_OPERATIONS[request.operation](left, DecimalValue(request.right))
    else:
        result = UNARY_OPERATIONS[request.operation](left)

    logger.info("computed", operation=request.operation.value, result=str(result))
    return ComputeResponse(operation=request.operation, result=str(result))


@router.post("/compare")
async def compare(request: CompareRequest) -> CompareResponse:
    """Three-way comparison of two decimals."""
    result = DecimalValue(request.left).compare(DecimalValue(request.right))
    return CompareResponse(result=result)
