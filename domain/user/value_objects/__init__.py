"""User 领域值对象模块"""

from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId
from domain.user.value_objects.user_role import UserRole

__all__ = ["Email", "UserId", "UserRole"]
