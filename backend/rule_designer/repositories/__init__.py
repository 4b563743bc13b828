"""Repository layer for database operations.

This module provides repository classes for managing saved rule graphs.
"""

from rule_designer.repositories.rule_repository import SavedRuleRepository

__all__ = [
    "SavedRuleRepository",
]
