# backend/rule_designer/schemas/rule_graph.py
"""Request and response schemas for rule graphs on the wire.

Nodes arrive in the designer's shape: ``{"id", "type", "data"}`` where
``type`` is rule/condition/action and an action's action type sits in
``data.type``. Editor-only keys (position, label, style...) are kept so saved
graphs round-trip unchanged.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from rule_designer.rule_engine.literals import stringify
from rule_designer.rule_engine.models import (
    ActionPayload,
    ConditionPayload,
    Edge,
    ExecutionResult,
    Node,
    NodeKind,
    RuleGraph,
    RulePayload,
    ValidationResult,
)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return stringify(value)


def _as_priority(value: Any) -> int:
    """Salience is integral: fractional priorities truncate, anything unparsable is 0."""
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


class NodeSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    data: dict[str, Any] = Field(default_factory=dict)

    def to_node(self) -> Node | None:
        """Convert to a core node; None for node types the core does not know."""
        data = self.data
        if self.type == NodeKind.RULE.value:
            payload = RulePayload(
                name=_as_text(data.get("name")),
                description=_as_text(data.get("description")),
                priority=_as_priority(data.get("priority")),
            )
        elif self.type == NodeKind.CONDITION.value:
            payload = ConditionPayload(
                field=_as_text(data.get("field")),
                operator=_as_text(data.get("operator")),
                value=_as_text(data.get("value")),
            )
        elif self.type == NodeKind.ACTION.value:
            payload = ActionPayload(
                action_type=_as_text(data.get("type")),
                target=_as_text(data.get("target")),
                value=_as_text(data.get("value")),
            )
        else:
            return None
        return Node(id=self.id, kind=NodeKind(self.type), payload=payload)


class EdgeSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    source: str
    target: str

    def to_edge(self) -> Edge:
        return Edge(source=self.source, target=self.target, id=self.id)


class RuleGraphSchema(BaseModel):
    """A rule graph as sent by the designer."""

    nodes: list[NodeSchema] = Field(default_factory=list)
    edges: list[EdgeSchema] = Field(default_factory=list)

    def to_graph(self) -> RuleGraph:
        nodes = [node.to_node() for node in self.nodes]
        return RuleGraph(
            nodes=tuple(node for node in nodes if node is not None),
            edges=tuple(edge.to_edge() for edge in self.edges),
        )

    def first_rule_data(self) -> dict[str, Any]:
        for node in self.nodes:
            if node.type == NodeKind.RULE.value:
                return node.data
        return {}


class ExecuteRequest(RuleGraphSchema):
    """Graph plus the sample input to run it against."""

    model_config = ConfigDict(populate_by_name=True)

    input_data: Any = Field(default=None, alias="inputData")


class RunSavedRuleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input_data: Any = Field(default=None, alias="inputData")


class SaveRuleRequest(RuleGraphSchema):
    """Request model for saving a rule graph."""

    name: str | None = Field(default=None, description="Defaults to the rule node's name")
    description: str | None = Field(default=None, description="Defaults to the rule node's description")


class UpdateRuleRequest(BaseModel):
    """Partial update of a saved rule."""

    name: str | None = None
    description: str | None = None
    nodes: list[NodeSchema] | None = None
    edges: list[EdgeSchema] | None = None


class ValidationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    errors: list[str]

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResponse":
        return cls(is_valid=result.is_valid, errors=result.errors)


class ExecutionResponse(BaseModel):
    """Execution summary and trace as rendered by the designer."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    execution_time: float = Field(alias="executionTime")
    input_data: Any = Field(alias="inputData")
    output_data: Any = Field(alias="outputData")
    rules_executed: int = Field(alias="rulesExecuted")
    logs: list[str]

    @classmethod
    def from_result(cls, result: ExecutionResult) -> "ExecutionResponse":
        return cls(
            success=result.success,
            execution_time=result.elapsed_millis,
            input_data=result.input,
            output_data=result.output,
            rules_executed=result.rules_executed,
            logs=result.trace,
        )


class GeneratedCode(BaseModel):
    drl: str
