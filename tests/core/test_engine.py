from __future__ import annotations

from flowguard.core.engine import ValidationEngine, validate_node, validate_workflow
from flowguard.core.node import BaseNodeValidator, ValidatorRegistry
from flowguard.models.graph import Edge, Node
from flowguard.models.validation import ValidationError
from flowguard.nodes import default_registry


def _valid_graph() -> tuple[list[Node], list[Edge]]:
    nodes = [
        Node(id="s", kind="start", data={"label": "Start"}),
        Node(
            id="f",
            kind="form",
            data={
                "label": "Form",
                "customName": "Signup",
                "fields": [{"id": "f1", "name": "email", "label": "Email", "type": "string"}],
            },
        ),
        Node(
            id="c",
            kind="conditional",
            data={
                "label": "Conditional",
                "customName": "Has email",
                "fieldToEvaluate": "email",
                "operator": "is_empty",
            },
        ),
        Node(
            id="a",
            kind="api",
            data={"label": "API", "url": "https://api.example.com", "method": "POST"},
        ),
        Node(id="e", kind="end", data={"label": "End"}),
    ]
    edges = [
        Edge(id="e1", source="s", target="f"),
        Edge(id="e2", source="f", target="c"),
        Edge(id="e3", source="c", target="a", source_handle="true"),
        Edge(id="e4", source="c", target="e", source_handle="false"),
        Edge(id="e5", source="a", target="e"),
    ]
    return nodes, edges


class AlwaysFails(BaseNodeValidator):
    kind = "form"

    def check(self, payload) -> list[ValidationError]:
        return [ValidationError(id="always", message="nope")]


class TestValidateNode:
    def test_dispatches_form(self):
        assert validate_node("form", {"customName": "ab"}).error_ids() == ["customName"]

    def test_dispatches_conditional(self):
        assert "operator" in validate_node("conditional", {}).error_ids()

    def test_dispatches_api(self):
        assert validate_node("api", {}).error_ids() == ["url", "method"]

    def test_start_and_end_valid(self):
        assert validate_node("start", {}).is_valid
        assert validate_node("end", {}).is_valid

    def test_unknown_kind_is_valid(self):
        result = validate_node("webhook", {"anything": True})
        assert result.is_valid
        assert result.errors == []

    def test_node_errors_carry_no_node_id(self):
        assert validate_node("api", {}).errors[0].node_id is None


class TestValidateWorkflow:
    def test_valid_workflow(self):
        nodes, edges = _valid_graph()
        result = validate_workflow(nodes, edges)
        assert result.is_valid, result.error_ids()

    def test_empty_workflow(self):
        result = validate_workflow([], [])
        assert result.error_ids() == ["workflow-start", "workflow-end"]
        assert not result.is_valid

    def test_graph_errors_come_before_node_errors(self):
        nodes = [
            Node(id="s", kind="start"),
            Node(id="a", kind="api", data={"url": "ftp://x"}),
            Node(id="e", kind="end"),
        ]
        edges = [Edge(id="e1", source="s", target="e")]
        result = validate_workflow(nodes, edges)
        assert result.error_ids() == [
            "connection-in-a",
            "connection-out-a",
            "unreachable-a",
            "url",
            "method",
        ]

    def test_node_errors_stamped_with_node_id(self):
        nodes, edges = _valid_graph()
        nodes[3] = Node(id="a", kind="api", data={"label": "API"})
        result = validate_workflow(nodes, edges)
        assert [(e.id, e.node_id) for e in result.errors] == [("url", "a"), ("method", "a")]

    def test_node_errors_in_node_order(self):
        nodes, edges = _valid_graph()
        nodes[1] = Node(id="f", kind="form", data={})
        nodes[3] = Node(id="a", kind="api", data={})
        result = validate_workflow(nodes, edges)
        assert result.error_ids() == ["customName", "url", "method"]

    def test_node_and_graph_errors_coexist(self):
        nodes = [
            Node(id="s", kind="start"),
            Node(id="f", kind="form", data={"customName": "x"}),
            Node(id="e", kind="end"),
        ]
        result = validate_workflow(nodes, [Edge(id="e1", source="s", target="e")])
        assert "connection-in-f" in result.error_ids()
        assert "customName" in result.error_ids()

    def test_is_valid_matches_errors(self):
        nodes, edges = _valid_graph()
        for graph in ((nodes, edges), (nodes, []), ([], []), (nodes[:1], [])):
            result = validate_workflow(*graph)
            assert result.is_valid == (len(result.errors) == 0)


class TestValidationEngine:
    def test_uses_injected_registry(self):
        reg = ValidatorRegistry()
        reg.register(AlwaysFails)
        engine = ValidationEngine(reg)
        assert engine.validate_node("form", {}).error_ids() == ["always"]
        assert engine.validate_node("api", {}).is_valid
        assert engine.registry is reg

    def test_default_registry_covers_every_kind(self):
        engine = ValidationEngine(default_registry)
        assert set(engine.registry.list_kinds()) == {"start", "form", "conditional", "api", "end"}
