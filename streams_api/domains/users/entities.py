import uuid


class User:
    """Сущность пользователя"""

    def __init__(self, user_id: uuid.UUID):
        self.user_id = user_id

    @classmethod
    def create_user(cls) -> "User":
        return cls(user_id=uuid.uuid4())

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id})"
