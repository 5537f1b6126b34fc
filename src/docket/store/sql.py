"""SQLAlchemy-backed store: one table per collection."""

from typing import Dict, List, Optional, Type
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from docket import models
from docket.schemas.entities import Record
from docket.store.base import RECORD_TYPES, Collection, EntityStore

logger = logging.getLogger(__name__)

ORM_MODELS: Dict[Collection, Type[models.Base]] = {
    Collection.USERS: models.User,
    Collection.CASES: models.Case,
    Collection.HEARINGS: models.Hearing,
}


class SqlEntityStore(EntityStore):
    """Store records as ORM rows, opening a short-lived session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_record(self, collection: Collection, row) -> Record:
        return RECORD_TYPES[collection].model_validate(row)

    async def get(self, collection: Collection, entity_id: str) -> Optional[Record]:
        async with self._session_factory() as session:
            row = await session.get(ORM_MODELS[collection], entity_id)
            return self._to_record(collection, row) if row is not None else None

    async def put(self, collection: Collection, entity_id: str, entity: Record) -> None:
        model = ORM_MODELS[collection]
        data = entity.model_dump()
        data["id"] = entity_id
        async with self._session_factory() as session:
            try:
                await session.merge(model(**data))
                await session.commit()
            except Exception as e:
                logger.error(f"[store] Put {collection.value}/{entity_id} error: {e}")
                await session.rollback()
                raise

    async def delete(self, collection: Collection, entity_id: str) -> None:
        async with self._session_factory() as session:
            try:
                row = await session.get(ORM_MODELS[collection], entity_id)
                if row is None:
                    return
                await session.delete(row)
                await session.commit()
            except Exception as e:
                logger.error(f"[store] Delete {collection.value}/{entity_id} error: {e}")
                await session.rollback()
                raise

    async def scan(self, collection: Collection) -> List[Record]:
        model = ORM_MODELS[collection]
        async with self._session_factory() as session:
            stmt = select(model).order_by(model.created_at, model.id)
            result = await session.execute(stmt)
            return [self._to_record(collection, row) for row in result.scalars().all()]


__all__ = ["ORM_MODELS", "SqlEntityStore"]
