# backend/rule_designer/core/init_db.py
import asyncio
import logging
from rule_designer.core.database import engine, Base
# Import all models to register them with Base
from rule_designer.models import SavedRule  # noqa: F401

logger = logging.getLogger(__name__)


async def init_db():
    """Create database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


if __name__ == "__main__":
    asyncio.run(init_db())
