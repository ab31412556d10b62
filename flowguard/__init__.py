"""Validation engine for editor-built workflow graphs."""
from __future__ import annotations

__version__ = "0.1.0"

from flowguard.core.engine import ValidationEngine, validate_node, validate_workflow  # noqa: E402
from flowguard.models.graph import Edge, Node, NodeKind  # noqa: E402
from flowguard.models.validation import ValidationError, ValidationResult  # noqa: E402

__all__ = [
    "Edge",
    "Node",
    "NodeKind",
    "ValidationEngine",
    "ValidationError",
    "ValidationResult",
    "validate_node",
    "validate_workflow",
]
