from fastapi import Depends, Request

from streams_api.core.db import Database
from streams_api.db.repositories import StreamRepository
from streams_api.domains.streams.repository import StreamRepositoryInterface


def get_db(request: Request) -> Database:
    """Пул соединений, созданный при старте приложения"""
    return request.app.state.db


def get_stream_repository(db: Database = Depends(get_db)) -> StreamRepositoryInterface:
    return StreamRepository(db)
