"""REST API endpoints for compiling, executing and saving rule graphs."""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from typing import Any
from sqlalchemy.ext.asyncio import AsyncSession

from rule_designer.core.config import settings
from rule_designer.core.database import get_db
from rule_designer.models.rule import SavedRule
from rule_designer.repositories.rule_repository import SavedRuleRepository
from rule_designer.rule_engine import execute, generate_code, link, validate
from rule_designer.rule_engine.templates import default_input, get_templates
from rule_designer.schemas.rule_graph import (
    ExecuteRequest,
    ExecutionResponse,
    GeneratedCode,
    RuleGraphSchema,
    RunSavedRuleRequest,
    SaveRuleRequest,
    UpdateRuleRequest,
    ValidationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rules", tags=["rules"])


def _saved_rule_to_dict(rule: SavedRule) -> dict[str, Any]:
    return {
        "id": rule.id,
        "name": rule.name,
        "description": rule.description,
        "nodes": rule.nodes,
        "edges": rule.edges,
        "createdAt": rule.created_at.isoformat(),
        "updatedAt": rule.updated_at.isoformat(),
    }


def _saved_graph(rule: SavedRule) -> RuleGraphSchema:
    return RuleGraphSchema.model_validate({"nodes": rule.nodes, "edges": rule.edges})


def _drl_filename(name: str | None) -> str:
    """File name for a DRL download; ASCII only so it fits a latin-1 header."""
    if not name:
        return settings.DRL_FILENAME
    safe_name = "".join(
        c if (c.isascii() and c.isalnum()) or c in ("-", "_") else "_" for c in name
    )
    return f"{safe_name}.drl"


def _drl_attachment(drl: str, filename: str) -> PlainTextResponse:
    return PlainTextResponse(
        content=drl,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


async def _get_saved_rule(rule_id: str, db: AsyncSession) -> SavedRule:
    rule = await SavedRuleRepository(db).get_by_id(rule_id)
    if rule is None:
        raise HTTPException(status_code=404, detail=f"Rule '{rule_id}' not found")
    return rule


@router.get("/templates")
async def list_templates() -> dict[str, Any]:
    """Sample input templates and the starter graph."""
    return get_templates()


@router.post("/validate", response_model=ValidationResponse)
async def validate_graph(request: RuleGraphSchema) -> ValidationResponse:
    """Validate a rule graph.

    Args:
        request: Rule graph

    Returns:
        Validity flag and every error found
    """
    return ValidationResponse.from_result(validate(request.to_graph()))


@router.post("/generate", response_model=GeneratedCode)
async def generate_drl(request: RuleGraphSchema) -> GeneratedCode:
    """Generate DRL source for a rule graph."""
    return GeneratedCode(drl=generate_code(link(request.to_graph())))


@router.post("/generate/download")
async def download_drl(request: RuleGraphSchema) -> PlainTextResponse:
    """Generate DRL source as a downloadable .drl file."""
    drl = generate_code(link(request.to_graph()))
    return _drl_attachment(drl, settings.DRL_FILENAME)


@router.post("/execute", response_model=ExecutionResponse)
async def execute_graph(request: ExecuteRequest) -> ExecutionResponse:
    """Simulate executing a rule graph against sample input.

    Args:
        request: Rule graph plus inputData; the default template is used
            when inputData is omitted

    Returns:
        Execution summary and trace
    """
    input_data = request.input_data if request.input_data is not None else default_input()
    result = execute(link(request.to_graph()), input_data)
    return ExecutionResponse.from_result(result)


@router.get("/")
async def list_rules(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """List all saved rules.

    Returns:
        Dictionary with the saved rules and their count
    """
    rules = await SavedRuleRepository(db).list_all()
    return {
        "rules": [_saved_rule_to_dict(rule) for rule in rules],
        "count": len(rules),
    }


@router.post("/")
async def save_rule(
    request: SaveRuleRequest,
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Validate and save a rule graph.

    Args:
        request: Rule graph with optional name and description
        db: Database session

    Returns:
        The saved rule

    Raises:
        HTTPException: If the graph does not validate
    """
    validation = validate(request.to_graph())
    if not validation.is_valid:
        logger.info(f"Rejected invalid rule graph: {validation.errors}")
        raise HTTPException(status_code=400, detail={"errors": validation.errors})

    rule_data = request.first_rule_data()
    name = request.name or rule_data.get("name") or "Untitled Rule"
    description = request.description
    if description is None:
        description = rule_data.get("description") or ""

    rule = await SavedRuleRepository(db).add(
        name=name,
        description=description,
        nodes=[node.model_dump() for node in request.nodes],
        edges=[edge.model_dump(exclude_none=True) for edge in request.edges],
    )
    logger.info(f"Saved rule '{rule.name}' ({rule.id})")

    return {"message": "Rule saved successfully", "rule": _saved_rule_to_dict(rule)}


@router.get("/{rule_id}")
async def get_rule(rule_id: str, db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Get a saved rule.

    Raises:
        HTTPException: If rule is not found
    """
    return _saved_rule_to_dict(await _get_saved_rule(rule_id, db))


@router.put("/{rule_id}")
async def update_rule(
    rule_id: str,
    request: UpdateRuleRequest,
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Update a saved rule.

    Raises:
        HTTPException: If rule is not found
    """
    repo = SavedRuleRepository(db)
    rule = await repo.update(
        rule_id,
        name=request.name,
        description=request.description,
        nodes=None if request.nodes is None else [n.model_dump() for n in request.nodes],
        edges=None if request.edges is None else [e.model_dump(exclude_none=True) for e in request.edges],
    )
    if rule is None:
        raise HTTPException(status_code=404, detail=f"Rule '{rule_id}' not found")

    return {"message": "Rule updated successfully", "rule": _saved_rule_to_dict(rule)}


@router.delete("/{rule_id}")
async def delete_rule(rule_id: str, db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Delete a saved rule.

    Raises:
        HTTPException: If rule is not found
    """
    deleted = await SavedRuleRepository(db).remove(rule_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Rule '{rule_id}' not found")

    logger.info(f"Deleted rule {rule_id}")
    return {"message": f"Rule '{rule_id}' deleted successfully"}


@router.get("/{rule_id}/drl")
async def download_saved_drl(
    rule_id: str, db: AsyncSession = Depends(get_db)
) -> PlainTextResponse:
    """Download the DRL source of a saved rule.

    Raises:
        HTTPException: If rule is not found
    """
    rule = await _get_saved_rule(rule_id, db)
    drl = generate_code(link(_saved_graph(rule).to_graph()))
    return _drl_attachment(drl, _drl_filename(rule.name))


@router.post("/{rule_id}/execute", response_model=ExecutionResponse)
async def execute_saved_rule(
    rule_id: str,
    request: RunSavedRuleRequest,
    db: AsyncSession = Depends(get_db),
) -> ExecutionResponse:
    """Simulate executing a saved rule.

    Raises:
        HTTPException: If rule is not found
    """
    rule = await _get_saved_rule(rule_id, db)
    input_data = request.input_data if request.input_data is not None else default_input()
    result = execute(link(_saved_graph(rule).to_graph()), input_data)
    return ExecutionResponse.from_result(result)
