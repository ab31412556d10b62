from __future__ import annotations

from collections.abc import Iterable, Sequence

from flowguard.models.graph import Edge, Node, NodeKind
from flowguard.models.validation import ValidationError, ValidationResult

TRUE_HANDLE = "true"
FALSE_HANDLE = "false"


def validate_graph(nodes: Sequence[Node], edges: Sequence[Edge]) -> ValidationResult:
    """Check the structure of a whole graph, ignoring node payload content.

    Start/End cardinality is always checked. Connectivity, branch and
    reachability checks only run when there is more than one node.
    """
    errors: list[ValidationError] = []

    start_nodes = [n for n in nodes if n.kind == NodeKind.START]
    end_nodes = [n for n in nodes if n.kind == NodeKind.END]

    if len(start_nodes) != 1:
        errors.append(
            ValidationError(
                id="workflow-start",
                message=f"Workflow must have exactly one Start node (found {len(start_nodes)})",
            )
        )

    if len(end_nodes) != 1:
        errors.append(
            ValidationError(
                id="workflow-end",
                message=f"Workflow must have exactly one End node (found {len(end_nodes)})",
            )
        )

    if len(nodes) > 1:
        errors.extend(_connection_errors(nodes, edges))
        if len(start_nodes) == 1:
            errors.extend(_unreachable_errors(start_nodes[0], nodes, edges))

    return ValidationResult(errors=errors)


def reachable_from(start_id: str, edges: Iterable[Edge]) -> set[str]:
    """Return ids reachable from ``start_id`` along edges, including itself.

    Edge targets that name no node are still collected; callers only look up
    ids of nodes they hold.
    """
    adjacency: dict[str, list[str]] = {}
    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge.target)

    visited: set[str] = set()
    stack = [start_id]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        stack.extend(t for t in adjacency.get(current, ()) if t not in visited)
    return visited


def _connection_errors(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[ValidationError]:
    targets = {e.target for e in edges}
    handles: dict[str, set[str | None]] = {}
    for edge in edges:
        handles.setdefault(edge.source, set()).add(edge.source_handle)

    errors = []
    for node in nodes:
        name = node.display_name

        if node.kind != NodeKind.START and node.id not in targets:
            errors.append(
                ValidationError(
                    id=f"connection-in-{node.id}",
                    message=f'Node "{name}" has no incoming connections',
                    node_id=node.id,
                )
            )

        if node.kind != NodeKind.END and node.id not in handles:
            errors.append(
                ValidationError(
                    id=f"connection-out-{node.id}",
                    message=f'Node "{name}" has no outgoing connections',
                    node_id=node.id,
                )
            )

        if node.kind == NodeKind.CONDITIONAL:
            outgoing = handles.get(node.id, set())
            if TRUE_HANDLE not in outgoing:
                errors.append(
                    ValidationError(
                        id=f"connection-true-{node.id}",
                        message=f'Conditional node "{name}" missing TRUE path connection',
                        node_id=node.id,
                    )
                )
            if FALSE_HANDLE not in outgoing:
                errors.append(
                    ValidationError(
                        id=f"connection-false-{node.id}",
                        message=f'Conditional node "{name}" missing FALSE path connection',
                        node_id=node.id,
                    )
                )

    return errors


def _unreachable_errors(
    start: Node, nodes: Sequence[Node], edges: Sequence[Edge]
) -> list[ValidationError]:
    reachable = reachable_from(start.id, edges)
    return [
        ValidationError(
            id=f"unreachable-{node.id}",
            message=(
                f'Node "{node.display_name}" is not connected to the workflow '
                "(unreachable from Start)"
            ),
            node_id=node.id,
        )
        for node in nodes
        if node.id not in reachable
    ]
