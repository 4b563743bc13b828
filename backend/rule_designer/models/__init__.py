# Database models
from rule_designer.models.rule import SavedRule

__all__ = [
    "SavedRule",
]
