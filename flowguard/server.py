from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from flowguard import __version__
from flowguard.core.engine import ValidationEngine
from flowguard.models.server import (
    HealthResponse,
    KindListResponse,
    NodeValidationRequest,
    WorkflowValidationRequest,
)
from flowguard.models.validation import ValidationResult
from flowguard.nodes import default_registry

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the validation engine on startup."""
    app.state.engine = ValidationEngine(default_registry)
    logger.info("server.started", kinds=default_registry.list_kinds())
    yield
    logger.info("server.stopped")


app = FastAPI(title="flowguard", lifespan=lifespan)


def _get_engine() -> ValidationEngine:
    return app.state.engine


# --- Health ---


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(version=__version__)


# --- Kinds ---


@app.get("/api/kinds", response_model=KindListResponse)
async def list_kinds():
    return KindListResponse(kinds=_get_engine().registry.list_kinds())


# --- Validation ---


@app.post("/api/validate/workflow", response_model=ValidationResult)
async def validate_workflow(request: WorkflowValidationRequest):
    result = _get_engine().validate_workflow(request.nodes, request.edges)
    logger.info(
        "workflow.validation_requested",
        node_count=len(request.nodes),
        valid=result.is_valid,
    )
    return result


@app.post("/api/validate/node", response_model=ValidationResult)
async def validate_node(request: NodeValidationRequest):
    return _get_engine().validate_node(request.kind, request.data)
