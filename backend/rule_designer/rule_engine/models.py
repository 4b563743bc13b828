"""Shared data models for the rule graph compiler and interpreter."""

from dataclasses import dataclass, field
from typing import Any
from enum import Enum


class NodeKind(Enum):
    RULE = "rule"
    CONDITION = "condition"
    ACTION = "action"


class Operator(Enum):
    EQ = "=="
    NEQ = "!="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    CONTAINS = "contains"
    MATCHES = "matches"

    @classmethod
    def parse(cls, tag: str | None) -> "Operator | None":
        """Return the operator for a raw tag, or None if it is not recognised."""
        try:
            return cls(tag)
        except ValueError:
            return None


class ActionType(Enum):
    SET_PROPERTY = "setProperty"
    CALL_METHOD = "callMethod"
    INSERT_FACT = "insertFact"
    DELETE_FACT = "deleteFact"
    MODIFY_FACT = "modifyFact"

    @classmethod
    def parse(cls, tag: str | None) -> "ActionType | None":
        """Return the action type for a raw tag, or None if it is not recognised."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class RulePayload:
    name: str = ""
    description: str = ""
    priority: int = 1


@dataclass(frozen=True)
class ConditionPayload:
    field: str = ""
    operator: str = ""  # raw tag, see Operator
    value: str = ""


@dataclass(frozen=True)
class ActionPayload:
    action_type: str = ""  # raw tag, see ActionType
    target: str = ""
    value: str = ""


@dataclass(frozen=True)
class Node:
    id: str
    kind: NodeKind
    payload: RulePayload | ConditionPayload | ActionPayload


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    id: str | None = None


@dataclass(frozen=True)
class RuleGraph:
    """Snapshot of a rule graph as authored in the designer."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def nodes_of(self, kind: NodeKind) -> list[Node]:
        """Nodes of the given kind, in graph order."""
        return [node for node in self.nodes if node.kind is kind]


@dataclass(frozen=True)
class LinkedRule:
    """A rule node together with the conditions and actions it points to."""

    rule: Node
    conditions: tuple[Node, ...] = ()
    actions: tuple[Node, ...] = ()


@dataclass
class ExecutionResult:
    """Result of a simulated rule execution.

    Attributes:
        success: Whether every condition held and the actions were applied
        elapsed_millis: Wall-clock duration of the execution
        input: The caller's input, untouched
        output: Deep copy of the input with the actions applied
        rules_executed: 1 if the rule fired, 0 otherwise
        trace: Ordered, human-readable execution log
    """

    success: bool
    elapsed_millis: float
    input: Any
    output: Any
    rules_executed: int = 0
    trace: list[str] = field(default_factory=list)


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
