"""Static validation of rule graphs before they are saved."""

from rule_designer.rule_engine.linker import partition
from rule_designer.rule_engine.models import RuleGraph, ValidationResult


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def validate(graph: RuleGraph) -> ValidationResult:
    """Check a rule graph for missing fields and missing connections.

    All checks run so the caller sees every problem at once. Nodes are
    partitioned by kind only; edges matter only for the connectivity checks.

    Args:
        graph: Rule graph snapshot

    Returns:
        ValidationResult; valid iff no errors were found
    """
    rules, conditions, actions = partition(graph)
    errors: list[str] = []

    if not rules:
        errors.append("At least one rule node is required")

    for rule in rules:
        if _blank(rule.payload.name):
            errors.append("Rule must have a name")

    if not conditions:
        errors.append("At least one condition is required")

    if not actions:
        errors.append("At least one action is required")

    for index, node in enumerate(conditions, start=1):
        condition = node.payload
        if _blank(condition.field):
            errors.append(f"Condition {index}: Field is required")
        if _blank(condition.operator):
            errors.append(f"Condition {index}: Operator is required")
        if _blank(condition.value):
            errors.append(f"Condition {index}: Value is required")

    for index, node in enumerate(actions, start=1):
        action = node.payload
        if _blank(action.action_type):
            errors.append(f"Action {index}: Type is required")
        if _blank(action.target):
            errors.append(f"Action {index}: Target is required")
        if _blank(action.value):
            errors.append(f"Action {index}: Value is required")

    rule_ids = {node.id for node in rules}
    condition_ids = {node.id for node in conditions}
    action_ids = {node.id for node in actions}

    if not any(e.source in rule_ids and e.target in condition_ids for e in graph.edges):
        errors.append("Rules must be connected to conditions")

    if not any(e.source in rule_ids and e.target in action_ids for e in graph.edges):
        errors.append("Rules must be connected to actions")

    return ValidationResult(is_valid=not errors, errors=errors)
