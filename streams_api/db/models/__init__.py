from streams_api.db.base import Base
from streams_api.db.models.stream import Stream
from streams_api.db.models.user import User

__all__ = [
    "Base",
    "Stream",
    "User",
]
