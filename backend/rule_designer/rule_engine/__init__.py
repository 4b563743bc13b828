"""Rule graph compiler and interpreter.

This package turns a visually authored rule graph (one rule node, its
condition nodes and its action nodes) into two artifacts:

- Drools-style DRL source text
- A simulated execution result with an ordered trace

It also validates graphs before they are saved. Every operation is a pure
function of its inputs.
"""

# Data models
from rule_designer.rule_engine.models import (
    NodeKind,
    Operator,
    ActionType,
    RulePayload,
    ConditionPayload,
    ActionPayload,
    Node,
    Edge,
    RuleGraph,
    LinkedRule,
    ExecutionResult,
    ValidationResult,
)

# Literal coercion and path access
from rule_designer.rule_engine.literals import UNDEFINED, Coerced, LiteralKind, coerce
from rule_designer.rule_engine.paths import PathConflictError, assign, resolve

# Condition evaluation
from rule_designer.rule_engine.evaluator import ConditionEvaluator

# Linking and validation
from rule_designer.rule_engine.linker import link, partition
from rule_designer.rule_engine.validator import validate

# DRL generation and simulated execution
from rule_designer.rule_engine.drl_generator import DRLGenerator, generate_code
from rule_designer.rule_engine.interpreter import RuleInterpreter, execute

__all__ = [
    # Data models
    "NodeKind",
    "Operator",
    "ActionType",
    "RulePayload",
    "ConditionPayload",
    "ActionPayload",
    "Node",
    "Edge",
    "RuleGraph",
    "LinkedRule",
    "ExecutionResult",
    "ValidationResult",
    # Literal coercion and path access
    "UNDEFINED",
    "Coerced",
    "LiteralKind",
    "coerce",
    "PathConflictError",
    "assign",
    "resolve",
    # Condition evaluation
    "ConditionEvaluator",
    # Linking and validation
    "link",
    "partition",
    "validate",
    # DRL generation and simulated execution
    "DRLGenerator",
    "generate_code",
    "RuleInterpreter",
    "execute",
]
