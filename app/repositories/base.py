import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def persistence_guard(db: AsyncSession, action: str):
    """Откатывает транзакцию и поднимает PersistenceFailure при ошибке SQLAlchemy."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Ошибка БД ({action}): {e}")
        await db.rollback()
        raise PersistenceFailure(action) from e
