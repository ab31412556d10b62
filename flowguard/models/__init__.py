from __future__ import annotations

from flowguard.models.graph import Edge, Node, NodeKind, WorkflowSnapshot
from flowguard.models.server import (
    HealthResponse,
    KindListResponse,
    NodeValidationRequest,
    WorkflowValidationRequest,
)
from flowguard.models.settings import FlowguardConfig
from flowguard.models.validation import ValidationError, ValidationResult

__all__ = [
    "Edge",
    "FlowguardConfig",
    "HealthResponse",
    "KindListResponse",
    "Node",
    "NodeKind",
    "NodeValidationRequest",
    "ValidationError",
    "ValidationResult",
    "WorkflowSnapshot",
    "WorkflowValidationRequest",
]
