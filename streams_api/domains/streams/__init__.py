from streams_api.domains.streams.entities import Stream
from streams_api.domains.streams.repository import StreamRepositoryInterface
from streams_api.domains.streams.schemas import (
    StreamCreate, StreamResponse, StreamSummaryResponse
)

__all__ = [
    "Stream",
    "StreamRepositoryInterface",
    "StreamCreate", "StreamResponse", "StreamSummaryResponse",
]
