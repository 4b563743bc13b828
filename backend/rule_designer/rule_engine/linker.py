"""Graph linker: resolves which conditions and actions belong to the rule."""

from rule_designer.rule_engine.models import LinkedRule, Node, NodeKind, RuleGraph


def partition(graph: RuleGraph) -> tuple[list[Node], list[Node], list[Node]]:
    """Split the graph's nodes by kind, ignoring edges.

    Returns:
        (rule nodes, condition nodes, action nodes), each in graph order
    """
    return (
        graph.nodes_of(NodeKind.RULE),
        graph.nodes_of(NodeKind.CONDITION),
        graph.nodes_of(NodeKind.ACTION),
    )


def link(graph: RuleGraph) -> LinkedRule | None:
    """Link the graph's rule node to the conditions and actions it points to.

    Only the first rule node is considered. A condition or action belongs to
    the rule when an edge runs from the rule to it; unconnected nodes and
    dangling edges are ignored.

    Args:
        graph: Rule graph snapshot

    Returns:
        The linked rule, or None if the graph has no rule node
    """
    rules, conditions, actions = partition(graph)
    if not rules:
        return None

    rule = rules[0]
    targets = {edge.target for edge in graph.edges if edge.source == rule.id}

    return LinkedRule(
        rule=rule,
        conditions=tuple(node for node in conditions if node.id in targets),
        actions=tuple(node for node in actions if node.id in targets),
    )
