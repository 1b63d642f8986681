import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from streams_api.domains.streams.entities import Stream


class StreamRepositoryInterface(ABC):
    """Контракт хранилища стримов.

    ``find_by_id`` возвращает ``None``, если стрим не найден. Ошибки
    хранилища выбрасываются как ``RepositoryError``. ``update`` и ``delete``
    не считают отсутствие строки ошибкой и лишь возвращают флаг того,
    была ли строка затронута.
    """

    @abstractmethod
    async def create(self, stream: Stream) -> Stream:
        """Сохранение нового стрима"""

    @abstractmethod
    async def find_by_id(self, stream_id: uuid.UUID) -> Optional[Stream]:
        """Стрим по идентификатору"""

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> List[Stream]:
        """Стримы пользователя, новые первыми"""

    @abstractmethod
    async def find_all(self) -> List[Stream]:
        """Все стримы, новые первыми"""

    @abstractmethod
    async def update(self, stream: Stream) -> bool:
        """Обновление заголовка и описания"""

    @abstractmethod
    async def delete(self, stream_id: uuid.UUID) -> bool:
        """Удаление стрима"""
