"""Shared write helpers - storage failures surface as PersistenceError."""

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.errors import PersistenceError


async def flush(db: AsyncSession, action: str, instance=None) -> None:
    """Flush pending changes (and refresh ``instance``), re-raising storage errors as PersistenceError."""
    try:
        await db.flush()
        if instance is not None:
            await db.refresh(instance)
    except SQLAlchemyError as e:
        logfire.error("persistence_error", action=action, error=str(e))
        raise PersistenceError(f"Error while trying to {action}: {e}") from e
