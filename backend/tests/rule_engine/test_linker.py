"""Tests for the graph linker."""

from rule_designer.rule_engine.linker import link, partition
from rule_designer.rule_engine.models import (
    ActionPayload,
    ConditionPayload,
    Edge,
    Node,
    NodeKind,
    RuleGraph,
    RulePayload,
)


def _rule(node_id, name="Rule"):
    return Node(node_id, NodeKind.RULE, RulePayload(name=name))


def _condition(node_id, field="customer.age"):
    return Node(node_id, NodeKind.CONDITION, ConditionPayload(field, ">=", "18"))


def _action(node_id, target="customer.eligible"):
    return Node(node_id, NodeKind.ACTION, ActionPayload("setProperty", target, "true"))


class TestLink:
    """Tests for link()."""

    def test_no_rule_node(self):
        graph = RuleGraph(nodes=(_condition("c1"), _action("a1")))
        assert link(graph) is None

    def test_links_connected_nodes(self, age_check_graph):
        linked = link(age_check_graph)

        assert linked is not None
        assert linked.rule.id == "rule-1"
        assert [n.id for n in linked.conditions] == ["cond-1"]
        assert [n.id for n in linked.actions] == ["act-1"]

    def test_connectivity_determines_membership(self):
        graph = RuleGraph(
            nodes=(_rule("r1"), _condition("c1"), _condition("c2"), _action("a1")),
            edges=(Edge("r1", "c1"),),
        )
        linked = link(graph)

        assert [n.id for n in linked.conditions] == ["c1"]
        assert linked.actions == ()

    def test_edge_direction_matters(self):
        graph = RuleGraph(
            nodes=(_rule("r1"), _condition("c1"), _action("a1")),
            edges=(Edge("c1", "r1"), Edge("a1", "r1")),
        )
        linked = link(graph)

        assert linked.conditions == ()
        assert linked.actions == ()

    def test_order_follows_nodes_not_edges(self):
        graph = RuleGraph(
            nodes=(_rule("r1"), _condition("c1"), _condition("c2"), _condition("c3")),
            edges=(Edge("r1", "c3"), Edge("r1", "c1"), Edge("r1", "c2")),
        )
        linked = link(graph)

        assert [n.id for n in linked.conditions] == ["c1", "c2", "c3"]

    def test_first_rule_wins(self):
        graph = RuleGraph(
            nodes=(
                _condition("c2", field="order.amount"),
                _rule("r1", name="First"),
                _rule("r2", name="Second"),
                _condition("c1"),
                _action("a1"),
                _action("a2", target="order.flagged"),
            ),
            edges=(
                Edge("r1", "c1"),
                Edge("r1", "a1"),
                Edge("r2", "c2"),
                Edge("r2", "a2"),
            ),
        )
        linked = link(graph)

        assert linked.rule.payload.name == "First"
        assert [n.id for n in linked.conditions] == ["c1"]
        assert [n.id for n in linked.actions] == ["a1"]

    def test_dangling_edges_are_ignored(self):
        graph = RuleGraph(
            nodes=(_rule("r1"), _condition("c1")),
            edges=(Edge("r1", "missing"), Edge("ghost", "c1"), Edge("r1", "c1")),
        )
        linked = link(graph)

        assert [n.id for n in linked.conditions] == ["c1"]

    def test_rule_to_rule_edge_is_not_a_condition(self):
        graph = RuleGraph(
            nodes=(_rule("r1"), _rule("r2")),
            edges=(Edge("r1", "r2"),),
        )
        linked = link(graph)

        assert linked.conditions == ()
        assert linked.actions == ()


class TestPartition:
    """Tests for partition()."""

    def test_partition_ignores_edges(self):
        graph = RuleGraph(
            nodes=(_action("a1"), _rule("r1"), _condition("c1"), _condition("c2")),
        )
        rules, conditions, actions = partition(graph)

        assert [n.id for n in rules] == ["r1"]
        assert [n.id for n in conditions] == ["c1", "c2"]
        assert [n.id for n in actions] == ["a1"]
