import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.sql import Executable

from streams_api.core.errors import DatabaseConnectionError, RepositoryError
from streams_api.db.models import Base

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Database:
    """Пул соединений с БД и выполнение одиночных параметризованных запросов.

    Каждый запрос берет сессию из пула, выполняет одно выражение и сразу
    возвращает соединение обратно. Соединение никогда не удерживается
    дольше одного запроса.
    """

    def __init__(self, engine: AsyncEngine, query_timeout: Optional[float] = None):
        self.engine = engine
        self.query_timeout = query_timeout
        self._session_factory = async_sessionmaker(
            bind=engine, class_=AsyncSession, expire_on_commit=False
        )
        self._closed = False

    @classmethod
    async def connect(
        cls,
        database_url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: float = 30.0,
        query_timeout: Optional[float] = None,
        echo: bool = False,
    ) -> "Database":
        """Создание пула и проверка соединения"""
        engine_options = {"echo": echo, "pool_pre_ping": True}
        # SQLite используется только локально и в тестах, у него свой пул
        if make_url(database_url).get_backend_name() != "sqlite":
            engine_options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
            )

        engine = create_async_engine(database_url, **engine_options)
        db = cls(engine, query_timeout=query_timeout)
        try:
            await db.ping()
        except Exception as e:
            await engine.dispose()
            logger.error(f"Failed to ping database: {e}")
            raise DatabaseConnectionError(f"failed to ping database: {e}") from e

        logger.info("Database connection pool initialized")
        return db

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await asyncio.wait_for(conn.execute(text("SELECT 1")), timeout=self.query_timeout)

    async def is_alive(self) -> bool:
        """Проверка доступности БД без выброса исключений"""
        try:
            await self.ping()
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    async def close(self) -> None:
        """Закрытие всех соединений пула"""
        if self._closed:
            return
        self._closed = True
        await self.engine.dispose()
        logger.info("Database connection pool closed")

    async def create_all(self) -> None:
        """Создание таблиц по метаданным моделей"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def execute(self, statement: Executable) -> int:
        """Выполнение INSERT/UPDATE/DELETE, возвращает число затронутых строк"""

        async def operation() -> int:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(statement)
                    rowcount = result.rowcount
            return rowcount

        return await self._run(operation)

    async def fetch_one(self, statement: Executable) -> Optional[Any]:
        """Одна строка или None, если ничего не найдено"""

        async def operation() -> Optional[Any]:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                return result.scalar_one_or_none()

        return await self._run(operation)

    async def fetch_all(self, statement: Executable) -> List[Any]:
        async def operation() -> List[Any]:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                return list(result.scalars().all())

        return await self._run(operation)

    async def _run(self, operation: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(operation(), timeout=self.query_timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Query timed out after {self.query_timeout}s")
            raise RepositoryError("query timed out") from e
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Query failed: {e}")
            raise RepositoryError(str(e)) from e
