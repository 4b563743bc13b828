"""Shared rule graph fixtures."""

import pytest
from rule_designer.rule_engine.models import (
    ActionPayload,
    ConditionPayload,
    Edge,
    Node,
    NodeKind,
    RuleGraph,
    RulePayload,
)


@pytest.fixture
def age_check_graph():
    """Age Check: customer.age >= 18 -> set customer.eligible = true."""
    return RuleGraph(
        nodes=(
            Node("rule-1", NodeKind.RULE, RulePayload(name="Age Check", priority=1)),
            Node(
                "cond-1",
                NodeKind.CONDITION,
                ConditionPayload(field="customer.age", operator=">=", value="18"),
            ),
            Node(
                "act-1",
                NodeKind.ACTION,
                ActionPayload(
                    action_type="setProperty", target="customer.eligible", value="true"
                ),
            ),
        ),
        edges=(
            Edge(source="rule-1", target="cond-1"),
            Edge(source="rule-1", target="act-1"),
        ),
    )
