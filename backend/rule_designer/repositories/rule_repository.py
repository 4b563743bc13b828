"""Repository for saved rule graphs."""

from typing import Any, List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from rule_designer.models.rule import SavedRule


class SavedRuleRepository:
    """Repository for SavedRule database operations.

    Saved rules are handed to the rule engine by value; the engine itself
    never reads or writes them.
    """

    def __init__(self, session: AsyncSession):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(
        self,
        name: str,
        nodes: list[dict[str, Any]],
        edges: list[dict[str, Any]],
        description: str = "",
        rule_id: Optional[str] = None,
    ) -> SavedRule:
        """Save a new rule graph.

        Args:
            name: Display name of the rule
            nodes: Designer node dicts
            edges: Designer edge dicts
            description: Optional description
            rule_id: Explicit id; generated when omitted

        Returns:
            Created SavedRule instance
        """
        fields = dict(name=name, description=description, nodes=nodes, edges=edges)
        if rule_id is not None:
            fields["id"] = rule_id

        rule = SavedRule(**fields)
        self.session.add(rule)
        await self.session.commit()
        await self.session.refresh(rule)
        return rule

    async def get_by_id(self, rule_id: str) -> Optional[SavedRule]:
        """Get a saved rule by id.

        Args:
            rule_id: Rule id

        Returns:
            SavedRule instance or None
        """
        result = await self.session.execute(
            select(SavedRule).where(SavedRule.id == rule_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[SavedRule]:
        """List all saved rules, oldest first."""
        result = await self.session.execute(
            select(SavedRule).order_by(SavedRule.created_at, SavedRule.id)
        )
        return list(result.scalars().all())

    async def update(
        self,
        rule_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        nodes: Optional[list[dict[str, Any]]] = None,
        edges: Optional[list[dict[str, Any]]] = None,
    ) -> Optional[SavedRule]:
        """Update a saved rule; fields left as None are unchanged.

        Returns:
            Updated SavedRule or None if not found
        """
        rule = await self.get_by_id(rule_id)
        if rule is None:
            return None

        if name is not None:
            rule.name = name
        if description is not None:
            rule.description = description
        if nodes is not None:
            rule.nodes = nodes
        if edges is not None:
            rule.edges = edges

        await self.session.commit()
        await self.session.refresh(rule)
        return rule

    async def remove(self, rule_id: str) -> bool:
        """Delete a saved rule.

        Returns:
            True if deleted, False if not found
        """
        rule = await self.get_by_id(rule_id)
        if rule:
            await self.session.delete(rule)
            await self.session.commit()
            return True
        return False

    async def clear(self) -> None:
        """Delete every saved rule."""
        await self.session.execute(delete(SavedRule))
        await self.session.commit()
