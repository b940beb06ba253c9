"""User 领域模块

用户实体、值对象和仓储接口。
"""

from domain.user.entities.user import User
from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects import Email, UserId, UserRole

__all__ = [
    "User",
    "UserRepository",
    "Email",
    "UserId",
    "UserRole",
]
