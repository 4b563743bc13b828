# backend/rule_designer/models/rule.py
import uuid
from datetime import datetime
from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column
from rule_designer.core.database import Base


def _new_rule_id() -> str:
    return uuid.uuid4().hex


class SavedRule(Base):
    """A rule graph saved from the designer."""
    __tablename__ = "saved_rules"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_rule_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)  # e.g., "Customer Age Validation"
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    nodes: Mapped[list] = mapped_column(JSON, default=list, nullable=False)  # designer node dicts
    edges: Mapped[list] = mapped_column(JSON, default=list, nullable=False)  # designer edge dicts
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    def __init__(self, **kwargs):
        if 'description' not in kwargs or kwargs['description'] is None:
            kwargs['description'] = ""
        super().__init__(**kwargs)
