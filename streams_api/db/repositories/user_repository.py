from typing import List, Optional
import uuid

from sqlalchemy import select, insert, delete

from streams_api.core.db import Database
from streams_api.db.models.user import User as UserModel
from streams_api.domains.users.entities import User
from streams_api.domains.users.repository import UserRepositoryInterface


class UserRepository(UserRepositoryInterface):
    """Репозиторий для работы с пользователями"""

    def __init__(self, db: Database):
        self.db = db

    async def create(self, user: User) -> User:
        """Создание нового пользователя"""
        await self.db.execute(insert(UserModel).values(user_id=user.user_id))
        return user

    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """Получение пользователя по идентификатору"""
        db_user = await self.db.fetch_one(
            select(UserModel).where(UserModel.user_id == user_id)
        )
        return User(user_id=db_user.user_id) if db_user else None

    async def find_all(self) -> List[User]:
        """Получение списка пользователей"""
        db_users = await self.db.fetch_all(select(UserModel).order_by(UserModel.user_id))
        return [User(user_id=u.user_id) for u in db_users]

    async def delete(self, user_id: uuid.UUID) -> bool:
        """Удаление пользователя"""
        stmt = delete(UserModel).where(UserModel.user_id == user_id)
        return await self.db.execute(stmt) > 0
