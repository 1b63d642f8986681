from streams_api.db.repositories.stream_repository import StreamRepository
from streams_api.db.repositories.user_repository import UserRepository

__all__ = [
    "StreamRepository",
    "UserRepository",
]
