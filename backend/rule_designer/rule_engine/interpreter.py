"""Interpreter for simulated execution of a linked rule against sample input."""

import copy
import logging
import time
from typing import Any

from rule_designer.rule_engine.evaluator import ConditionEvaluator
from rule_designer.rule_engine.literals import coerce, stringify
from rule_designer.rule_engine.models import (
    ActionPayload,
    ActionType,
    ConditionPayload,
    ExecutionResult,
    LinkedRule,
    Node,
)
from rule_designer.rule_engine.paths import assign, resolve

logger = logging.getLogger(__name__)


class RuleInterpreter:
    """Simulates firing a linked rule against a JSON-like input tree.

    Conditions are evaluated in order and must all hold; the first failing
    condition stops evaluation. Actions are then applied in order to a deep
    copy of the input. Property-setting actions mutate the copy, the others
    are only recorded in the trace. A failing action is traced and does not
    stop the remaining ones.
    """

    def __init__(self, evaluator: ConditionEvaluator | None = None):
        self.evaluator = evaluator or ConditionEvaluator()

    def execute(self, linked: LinkedRule | None, input_data: Any) -> ExecutionResult:
        """Execute a linked rule.

        Args:
            linked: The linked rule, or None when the graph has no rule node
            input_data: Input value tree; never modified

        Returns:
            ExecutionResult with the mutated copy and the execution trace
        """
        start = time.perf_counter()
        output = copy.deepcopy(input_data)
        trace = ["Starting rule execution..."]

        def finish(success: bool) -> ExecutionResult:
            elapsed = (time.perf_counter() - start) * 1000
            return ExecutionResult(
                success=success,
                elapsed_millis=elapsed,
                input=input_data,
                output=output,
                rules_executed=1 if success else 0,
                trace=trace,
            )

        if linked is None:
            trace.append("No rules to execute")
            logger.info("Execution skipped: graph has no rule node")
            return finish(False)

        name = linked.rule.payload.name
        trace.append(f"Executing rule: {name}")
        trace.append(
            f"Found {len(linked.conditions)} conditions and {len(linked.actions)} actions"
        )

        if not self._conditions_met(linked.conditions, output, trace):
            trace.append("Not all conditions were met. Rule execution stopped.")
            result = finish(False)
            logger.info(f"Rule '{name}' did not fire ({result.elapsed_millis:.2f}ms)")
            return result

        trace.append("All conditions met. Executing actions...")
        for node in linked.actions:
            self._apply_action(node, output, trace)

        result = finish(True)
        logger.info(f"Rule '{name}' executed in {result.elapsed_millis:.2f}ms")
        return result

    def _conditions_met(
        self, conditions: tuple[Node, ...], data: Any, trace: list[str]
    ) -> bool:
        for node in conditions:
            condition: ConditionPayload = node.payload
            actual = resolve(data, condition.field)

            trace.append(
                f"Evaluating condition: {condition.field} {condition.operator} {condition.value}"
            )
            trace.append(f"Actual value: {stringify(actual)}")

            result = self.evaluator.evaluate(actual, condition.operator, condition.value)
            trace.append(f"Condition result: {stringify(result)}")

            if not result:
                return False
        return True

    def _apply_action(self, node: Node, data: Any, trace: list[str]) -> None:
        action: ActionPayload = node.payload
        trace.append(
            f"Executing action: {action.action_type} on {action.target} with value {action.value}"
        )

        try:
            action_type = ActionType.parse(action.action_type)
            if action_type is ActionType.SET_PROPERTY:
                assign(data, action.target, coerce(action.value).value)
                trace.append(f"Set {action.target} = {action.value}")
            elif action_type is ActionType.CALL_METHOD:
                trace.append(f"Called method: {action.value} (simulated)")
            elif action_type is ActionType.INSERT_FACT:
                trace.append(f"Inserted fact: {action.target} (simulated)")
            elif action_type is ActionType.DELETE_FACT:
                trace.append(f"Deleted fact: {action.target} (simulated)")
            elif action_type is ActionType.MODIFY_FACT:
                assign(data, action.target, coerce(action.value).value)
                trace.append(f"Modified {action.target} = {action.value}")
            else:
                trace.append(f"Unknown action type: {action.action_type}")
        except Exception as e:
            logger.warning(f"Action {node.id} failed: {e}")
            trace.append(f"Error executing action: {type(e).__name__}: {e}")


def execute(linked: LinkedRule | None, input_data: Any) -> ExecutionResult:
    """Execute a linked rule against input data."""
    return RuleInterpreter().execute(linked, input_data)
