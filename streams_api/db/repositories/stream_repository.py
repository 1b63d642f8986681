from datetime import timezone
from typing import List, Optional
import uuid

from sqlalchemy import select, insert, update, delete

from streams_api.core.db import Database
from streams_api.db.models.stream import Stream as StreamModel
from streams_api.domains.streams.entities import Stream
from streams_api.domains.streams.repository import StreamRepositoryInterface


class StreamRepository(StreamRepositoryInterface):
    """Репозиторий для работы со стримами"""

    def __init__(self, db: Database):
        self.db = db

    async def create(self, stream: Stream) -> Stream:
        """Создание нового стрима"""
        stmt = insert(StreamModel).values(
            stream_id=stream.stream_id,
            user_id=stream.user_id,
            title=stream.title,
            description=stream.description,
            created_at=stream.created_at
        )
        await self.db.execute(stmt)
        return stream

    async def find_by_id(self, stream_id: uuid.UUID) -> Optional[Stream]:
        """Получение стрима по идентификатору"""
        db_stream = await self.db.fetch_one(
            select(StreamModel).where(StreamModel.stream_id == stream_id)
        )
        return self._to_domain(db_stream) if db_stream else None

    async def find_by_user_id(self, user_id: uuid.UUID) -> List[Stream]:
        """Получение стримов пользователя"""
        db_streams = await self.db.fetch_all(
            select(StreamModel)
            .where(StreamModel.user_id == user_id)
            .order_by(StreamModel.created_at.desc(), StreamModel.stream_id)
        )
        return [self._to_domain(s) for s in db_streams]

    async def find_all(self) -> List[Stream]:
        """Получение всех стримов"""
        db_streams = await self.db.fetch_all(
            select(StreamModel)
            .order_by(StreamModel.created_at.desc(), StreamModel.stream_id)
        )
        return [self._to_domain(s) for s in db_streams]

    async def update(self, stream: Stream) -> bool:
        """Обновление заголовка и описания стрима"""
        stmt = (
            update(StreamModel)
            .where(StreamModel.stream_id == stream.stream_id)
            .values(
                title=stream.title,
                description=stream.description
            )
        )
        return await self.db.execute(stmt) > 0

    async def delete(self, stream_id: uuid.UUID) -> bool:
        """Удаление стрима"""
        stmt = delete(StreamModel).where(StreamModel.stream_id == stream_id)
        return await self.db.execute(stmt) > 0

    def _to_domain(self, db_stream: StreamModel) -> Stream:
        """Преобразование модели БД в доменную сущность"""
        created_at = db_stream.created_at
        # SQLite не хранит часовой пояс, время всегда пишется в UTC
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Stream(
            stream_id=db_stream.stream_id,
            user_id=db_stream.user_id,
            title=db_stream.title,
            description=db_stream.description,
            created_at=created_at
        )
