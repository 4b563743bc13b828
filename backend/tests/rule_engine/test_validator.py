"""Tests for rule graph validation."""

from rule_designer.rule_engine.models import (
    ActionPayload,
    ConditionPayload,
    Edge,
    Node,
    NodeKind,
    RuleGraph,
    RulePayload,
)
from rule_designer.rule_engine.validator import validate


class TestValidate:
    """Tests for validate()."""

    def test_valid_graph(self, age_check_graph):
        result = validate(age_check_graph)

        assert result.is_valid is True
        assert result.errors == []

    def test_empty_graph(self):
        result = validate(RuleGraph())

        assert result.is_valid is False
        assert result.errors == [
            "At least one rule node is required",
            "At least one condition is required",
            "At least one action is required",
            "Rules must be connected to conditions",
            "Rules must be connected to actions",
        ]

    def test_reports_every_problem(self):
        graph = RuleGraph(nodes=(Node("r1", NodeKind.RULE, RulePayload(name="")),))
        result = validate(graph)

        assert result.is_valid is False
        assert result.errors == [
            "Rule must have a name",
            "At least one condition is required",
            "At least one action is required",
            "Rules must be connected to conditions",
            "Rules must be connected to actions",
        ]

    def test_blank_fields_are_reported_per_node(self):
        graph = RuleGraph(
            nodes=(
                Node("r1", NodeKind.RULE, RulePayload(name="  ")),
                Node("c1", NodeKind.CONDITION, ConditionPayload("customer.age", ">=", "18")),
                Node("c2", NodeKind.CONDITION, ConditionPayload("", " ", "")),
                Node("a1", NodeKind.ACTION, ActionPayload("", "customer.eligible", " ")),
            ),
            edges=(Edge("r1", "c1"), Edge("r1", "a1")),
        )
        result = validate(graph)

        assert result.errors == [
            "Rule must have a name",
            "Condition 2: Field is required",
            "Condition 2: Operator is required",
            "Condition 2: Value is required",
            "Action 1: Type is required",
            "Action 1: Value is required",
        ]

    def test_each_rule_node_needs_a_name(self):
        graph = RuleGraph(
            nodes=(
                Node("r1", NodeKind.RULE, RulePayload(name="")),
                Node("r2", NodeKind.RULE, RulePayload(name="")),
            ),
        )
        result = validate(graph)

        assert result.errors.count("Rule must have a name") == 2

    def test_connectivity_from_any_rule_node(self):
        """Connections are checked across all rule nodes, not just the first."""
        graph = RuleGraph(
            nodes=(
                Node("r1", NodeKind.RULE, RulePayload(name="First")),
                Node("r2", NodeKind.RULE, RulePayload(name="Second")),
                Node("c1", NodeKind.CONDITION, ConditionPayload("a.b", "==", "1")),
                Node("a1", NodeKind.ACTION, ActionPayload("setProperty", "a.c", "2")),
            ),
            edges=(Edge("r2", "c1"), Edge("r2", "a1")),
        )

        assert validate(graph).is_valid is True

    def test_unconnected_nodes(self):
        graph = RuleGraph(
            nodes=(
                Node("r1", NodeKind.RULE, RulePayload(name="Rule")),
                Node("c1", NodeKind.CONDITION, ConditionPayload("a.b", "==", "1")),
                Node("a1", NodeKind.ACTION, ActionPayload("setProperty", "a.c", "2")),
            ),
            edges=(Edge("c1", "r1"), Edge("r1", "a1")),
        )
        result = validate(graph)

        assert result.errors == ["Rules must be connected to conditions"]
