"""DRL code generator for linked rule graphs."""

import logging

from rule_designer.rule_engine.literals import coerce
from rule_designer.rule_engine.models import (
    ActionPayload,
    ActionType,
    ConditionPayload,
    LinkedRule,
    Node,
    RulePayload,
)

logger = logging.getLogger(__name__)

PREAMBLE = "package com.example.rules;\n\nimport java.util.*;\nimport java.math.*;\n\n"
INDENT = "    "


def capitalize_first(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def split_path(path: str) -> tuple[str, str]:
    """Split "object.property.sub" into ("object", "property.sub")."""
    object_name, _, property_path = path.partition(".")
    return object_name, property_path


class DRLGenerator:
    """Translates a linked rule into Drools rule language (DRL) source.

    The output is a fixed single-pass template: package/import preamble,
    optional description comment, the rule header, one pattern per condition
    in the ``when`` block and one statement per action in the ``then`` block.
    Malformed paths never raise; an empty segment renders as an empty
    identifier.
    """

    def generate(self, linked: LinkedRule | None) -> str:
        """Generate DRL source for a linked rule.

        Args:
            linked: The linked rule, or None when the graph has no rule node

        Returns:
            DRL source text
        """
        if linked is None:
            return "// No rules defined"

        rule: RulePayload = linked.rule.payload
        name = rule.name or "UnnamedRule"
        priority = rule.priority or 1

        lines = []
        if rule.description:
            lines += ["/**", f" * {rule.description}", " */"]

        lines += [f'rule "{name}"', f"{INDENT}salience {priority}", "when"]
        if linked.conditions:
            lines += [self._translate_condition(node) for node in linked.conditions]
        else:
            lines.append(f"{INDENT}// No conditions defined")

        lines.append("then")
        if linked.actions:
            for node in linked.actions:
                lines += self._translate_action(node)
            lines.append(f"{INDENT}update(${self._update_target(linked.actions[0])});")
        else:
            lines.append(f"{INDENT}// No actions defined")

        lines.append("end")

        drl = PREAMBLE + "\n".join(lines) + "\n"
        logger.debug(f"Generated DRL for rule '{name}' ({len(drl)} chars)")
        return drl

    def _translate_condition(self, node: Node) -> str:
        """Convert a condition node to a DRL pattern binding."""
        condition: ConditionPayload = node.payload
        object_name, property_path = split_path(condition.field)
        literal = coerce(condition.value).to_drl()

        return (
            f"{INDENT}${object_name} : {capitalize_first(object_name)}"
            f"({property_path} {condition.operator} {literal})"
        )

    def _translate_action(self, node: Node) -> list[str]:
        """Convert an action node to one or more DRL statement lines."""
        action: ActionPayload = node.payload
        object_name, property_path = split_path(action.target)
        action_type = ActionType.parse(action.action_type)

        if action_type is ActionType.SET_PROPERTY:
            literal = coerce(action.value).to_drl()
            return [f"{INDENT}${object_name}.set{capitalize_first(property_path)}({literal});"]
        elif action_type is ActionType.CALL_METHOD:
            return [f"{INDENT}${object_name}.{action.value}();"]
        elif action_type is ActionType.INSERT_FACT:
            return [f"{INDENT}insert(new {capitalize_first(action.target)}());"]
        elif action_type is ActionType.DELETE_FACT:
            return [f"{INDENT}delete(${object_name});"]
        elif action_type is ActionType.MODIFY_FACT:
            return [
                f"{INDENT}modify(${object_name}) {{",
                f"{INDENT * 2}set{capitalize_first(property_path)}({action.value})",
                f"{INDENT}}}",
            ]

        logger.warning(f"Unknown action type '{action.action_type}' on node {node.id}")
        return [f"{INDENT}// Unknown action type: {action.action_type}"]

    def _update_target(self, node: Node) -> str:
        object_name, _ = split_path(node.payload.target)
        return object_name or "object"


def generate_code(linked: LinkedRule | None) -> str:
    """Generate DRL source for a linked rule."""
    return DRLGenerator().generate(linked)
