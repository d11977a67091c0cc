"""
gRPC Scenario Harness Generator — HTTP API

Accepts a service description and returns the generated Go test runner
(plus a starter scenario file). Nothing is written to disk by the API.

Run: uvicorn grpc_scenario_gen.main:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from grpc_scenario_gen import config
from grpc_scenario_gen.code_generator import GenerationError, generate_test_code
from grpc_scenario_gen.orchestrator import run_pipeline
from grpc_scenario_gen.spec_review import review_service
from grpc_scenario_gen.spec_schema import ServiceDescription

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="gRPC Scenario Harness Generator",
    description="Feed it a gRPC service description, get a scenario-driven Go test runner.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class ValidateResponse(BaseModel):
    """Outcome of reviewing a service description."""
    valid: bool
    errors: list[str]
    warnings: list[str]


class GenerateResponse(BaseModel):
    """Response from the generate endpoint."""
    service_name: str
    files: dict[str, str]
    warnings: list[str] | None = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health", tags=["Health"])
def health_check():
    return {"status": "ok"}


@app.post("/validate", tags=["Generation"], response_model=ValidateResponse)
def validate_description(description: ServiceDescription):
    """Review a service description without generating anything."""
    result = review_service(description)
    return ValidateResponse(valid=result.valid, errors=result.errors, warnings=result.warnings)


@app.post("/generate", tags=["Generation"], response_model=GenerateResponse)
def generate_harness(description: ServiceDescription):
    """
    Validate a service description and generate the runner and scenario template.
    """
    result = run_pipeline(description)
    if result.rejected:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": result.errors, "warnings": result.warnings},
        )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Generation failed: {'; '.join(result.errors)}",
        )

    return GenerateResponse(
        service_name=description.service_name,
        files=result.files,
        warnings=result.warnings,
    )


@app.post("/generate/raw", tags=["Generation"], response_class=PlainTextResponse)
def generate_harness_raw(description: ServiceDescription):
    """Return only the generated Go runner as plain text."""
    review = review_service(description)
    if not review.valid:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": review.errors, "warnings": review.warnings},
        )
    try:
        code = generate_test_code(description)
    except GenerationError as e:
        logger.error(f"Generation failed for {description.service_name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Generation failed: {str(e)}",
        )
    return PlainTextResponse(content=code)
