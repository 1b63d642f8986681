from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
import uuid
from datetime import datetime

from streams_api.domains.streams.entities import Stream


class StreamCreate(BaseModel):
    """Схема для создания стрима"""
    user_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=500)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class StreamSummaryResponse(BaseModel):
    """Краткие данные стрима для списка (без описания)"""
    stream_id: uuid.UUID
    user_id: uuid.UUID
    title: str
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_entity(cls, stream: Stream) -> "StreamSummaryResponse":
        return cls(
            stream_id=stream.stream_id,
            user_id=stream.user_id,
            title=stream.title,
            created_at=stream.created_at
        )


class StreamResponse(StreamSummaryResponse):
    """Полные данные стрима"""
    description: str

    @classmethod
    def from_entity(cls, stream: Stream) -> "StreamResponse":
        return cls(
            stream_id=stream.stream_id,
            user_id=stream.user_id,
            title=stream.title,
            description=stream.description,
            created_at=stream.created_at
        )
