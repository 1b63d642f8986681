from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging
import uuid

from streams_api.api.deps import get_stream_repository
from streams_api.core.errors import NotFoundError
from streams_api.domains.streams.entities import Stream
from streams_api.domains.streams.repository import StreamRepositoryInterface
from streams_api.domains.streams.schemas import (
    StreamCreate, StreamResponse, StreamSummaryResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/streams", tags=["streams"])


@router.get("", response_model=List[StreamSummaryResponse])
async def list_streams(
    repository: StreamRepositoryInterface = Depends(get_stream_repository)
):
    """Получение списка стримов"""
    streams = await repository.find_all()
    return [StreamSummaryResponse.from_entity(stream) for stream in streams]


@router.post("", response_model=StreamResponse, status_code=status.HTTP_201_CREATED)
async def create_stream(
    stream_data: StreamCreate,
    repository: StreamRepositoryInterface = Depends(get_stream_repository)
):
    """Регистрация нового стрима"""
    stream = Stream.create_stream(
        user_id=stream_data.user_id,
        title=stream_data.title,
        description=stream_data.description
    )
    await repository.create(stream)
    logger.info(f"Created stream {stream.stream_id} for user {stream.user_id}")

    return StreamResponse.from_entity(stream)


@router.get("/{stream_id}", response_model=StreamResponse)
async def get_stream(
    stream_id: uuid.UUID,
    repository: StreamRepositoryInterface = Depends(get_stream_repository)
):
    """Получение стрима по идентификатору"""
    stream = await repository.find_by_id(stream_id)

    if not stream:
        raise NotFoundError("Stream not found")

    return StreamResponse.from_entity(stream)


@router.delete(
    "/{stream_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def delete_stream(
    stream_id: uuid.UUID,
    repository: StreamRepositoryInterface = Depends(get_stream_repository)
):
    """Удаление стрима"""
    # Отсутствие стрима не считается ошибкой
    deleted = await repository.delete(stream_id)
    if deleted:
        logger.info(f"Deleted stream {stream_id}")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
