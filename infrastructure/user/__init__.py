"""User 基础设施模块

提供用户的持久化实现。
"""

from infrastructure.user.models.user_model import UserModel
from infrastructure.user.repositories.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

__all__ = [
    "UserModel",
    "SqlAlchemyUserRepository",
]
