"""
Service Description Schema (Pydantic v2)

This is the input model for the harness generator. A ServiceDescription names
a gRPC service and lists its methods; the code generator renders it into a
scenario-driven Go test runner.

The models only enforce shape (required keys, string types, no unknown keys).
Content rules such as "no empty names" are enforced by spec_review, so an
invalid description can still be constructed and reported on.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------

class MethodDescription(BaseModel):
    """A single remote-call method of the service."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Method name, e.g. 'Hello'")
    request_type: str = Field(..., description="Request message type, e.g. 'HelloRequest'")
    response_type: str = Field(..., description="Response message type, e.g. 'HelloResponse'")


# ---------------------------------------------------------------------------
# Root model
# ---------------------------------------------------------------------------

class ServiceDescription(BaseModel):
    """
    The single input of the generator.

    Methods keep their declaration order; the dispatch block and the per-method
    test procedures are emitted in exactly this order.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    package: str = Field(..., description="Go package the harness is emitted under")
    service_name: str = Field(..., description="gRPC service name, e.g. 'TestService'")
    methods: tuple[MethodDescription, ...] = Field(..., description="Methods in declaration order")
