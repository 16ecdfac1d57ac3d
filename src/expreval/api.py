"""
FastAPI application and API routes for Expreval.
"""

import structlog
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from expreval import __version__
from expreval.config import settings
from expreval.evaluator import calculate
from expreval.models import EvaluationRequest, EvaluationResult

logger = structlog.get_logger()


app = FastAPI(
    title="Expreval",
    description="Arithmetic expression evaluator",
    version=__version__,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/v1/config")
async def get_config():
    """Get public configuration."""
    return {
        "app_name": settings.app_name,
        "strict": settings.strict,
        "max_expression_length": settings.max_expression_length,
    }


# =============================================================================
# Evaluation API
# =============================================================================

@app.post("/api/v1/evaluate", response_model=EvaluationResult)
async def evaluate_expression(request: EvaluationRequest):
    """
    Evaluate an arithmetic expression.

    Malformed expressions are not HTTP errors: they come back with
    ok=false and the error message, like any other result.
    """
    return _evaluate(request.expression, request.strict)


@app.get("/api/v1/evaluate", response_model=EvaluationResult)
async def evaluate_expression_query(
    expression: str = Query(..., description="Arithmetic expression to evaluate"),
    strict: bool | None = Query(None),
):
    """Evaluate an expression passed as a query parameter."""
    return _evaluate(expression, strict)


def _evaluate(expression: str, strict: bool | None) -> EvaluationResult:
    limit = settings.max_expression_length
    if limit is not None and len(expression) > limit:
        logger.warning("Expression too long", length=len(expression), limit=limit)
        raise HTTPException(
            status_code=413,
            detail=f"Expression exceeds maximum length of {limit} characters",
        )

    result = calculate(expression, strict=settings.strict if strict is None else strict)
    logger.info("Evaluated expression", ok=result.ok, error_kind=result.error_kind)
    return result
