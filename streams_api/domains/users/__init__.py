from streams_api.domains.users.entities import User
from streams_api.domains.users.repository import UserRepositoryInterface

__all__ = [
    "User",
    "UserRepositoryInterface",
]
