import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from streams_api.domains.users.entities import User


class UserRepositoryInterface(ABC):
    """Контракт хранилища пользователей"""

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        pass

    @abstractmethod
    async def delete(self, user_id: uuid.UUID) -> bool:
        pass
