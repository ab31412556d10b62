from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import BaseModel

from flowguard.core.graph import validate_graph
from flowguard.core.node import ValidatorRegistry
from flowguard.models.graph import Edge, Node
from flowguard.models.validation import ValidationResult
from flowguard.nodes import default_registry

logger = structlog.get_logger()


class ValidationEngine:
    """Runs node-level and graph-level validation against a validator registry.

    Holds no state between calls; the same engine can validate any number of
    graphs, concurrently or not.
    """

    def __init__(self, registry: ValidatorRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry

    def validate_node(
        self, kind: str, payload: dict[str, Any] | BaseModel | None
    ) -> ValidationResult:
        """Validate a single node's own configuration.

        Kinds without a registered validator have nothing to check and are
        valid.
        """
        validator_cls = self._registry.find(kind)
        if validator_cls is None:
            logger.debug("node.unknown_kind", kind=kind)
            return ValidationResult.ok()
        return validator_cls().validate(payload)

    def validate_workflow(self, nodes: Sequence[Node], edges: Sequence[Edge]) -> ValidationResult:
        """Validate a whole graph: graph errors first, then node errors in node order."""
        log = logger.bind(node_count=len(nodes), edge_count=len(edges))

        result = ValidationResult.merge(
            validate_graph(nodes, edges),
            *(self._validate_graph_node(node) for node in nodes),
        )
        log.debug("workflow.validated", valid=result.is_valid, error_count=len(result.errors))
        return result

    def _validate_graph_node(self, node: Node) -> ValidationResult:
        result = self.validate_node(node.kind, node.data)
        return ValidationResult(
            errors=[e.model_copy(update={"node_id": node.id}) for e in result.errors]
        )


_default_engine = ValidationEngine(default_registry)


def validate_node(kind: str, payload: dict[str, Any] | BaseModel | None) -> ValidationResult:
    return _default_engine.validate_node(kind, payload)


def validate_workflow(nodes: Sequence[Node], edges: Sequence[Edge]) -> ValidationResult:
    return _default_engine.validate_workflow(nodes, edges)
