import uuid
from datetime import datetime, timezone
from typing import Optional


class Stream:
    """Сущность стрима (записанной трансляции)"""

    def __init__(
        self,
        stream_id: uuid.UUID,
        user_id: uuid.UUID,
        title: str,
        description: str = "",
        created_at: Optional[datetime] = None
    ):
        self.stream_id = stream_id
        self.user_id = user_id
        self.title = title
        self.description = description
        self.created_at = created_at or datetime.now(timezone.utc)

    @classmethod
    def create_stream(cls, user_id: uuid.UUID, title: str, description: str = "") -> "Stream":
        """Создание нового стрима с новым идентификатором и временем создания"""
        return cls(
            stream_id=uuid.uuid4(),
            user_id=user_id,
            title=title,
            description=description,
            created_at=datetime.now(timezone.utc)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Stream):
            return False
        return self.stream_id == other.stream_id

    def __hash__(self) -> int:
        return hash(self.stream_id)

    def __repr__(self) -> str:
        return f"Stream(stream_id={self.stream_id}, user_id={self.user_id}, title={self.title})"
