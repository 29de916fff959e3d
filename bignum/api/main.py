"""FastAPI application for the calculator."""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bignum import __version__
from bignum.api.endpoints import router
from bignum.errors import ExpressionError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BIGNUM_HOST", "0.0.0.0")
PORT = int(os.environ.get("BIGNUM_PORT", "8000"))
DEBUG = os.environ.get("BIGNUM_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="bignum calculator",
    description="Exact arbitrary-precision decimal arithmetic over HTTP",
    version=__version__,
)


@app.exception_handler(ExpressionError)
async def expression_error_handler(request: Request, exc: ExpressionError) -> JSONResponse:
    """Malformed expressions are client errors, not server errors."""
    logger.info("expression_rejected", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the calculator API server.

    Configuration via environment variables:
    - BIGNUM_HOST: Host to bind to (default: 0.0.0.0)
    - BIGNUM_PORT: Port to bind to (default: 8000)
    - BIGNUM_DEBUG: Enable debug/reload mode (default: false)
    - BIGNUM_MAX_EXPRESSION_LENGTH: Longest accepted expression (default: 10000)
    """
    uvicorn.run(
        "bignum.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
