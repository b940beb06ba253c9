"""用户角色值对象"""

from enum import Enum
from typing import Any

from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Ok, Result


class UserRole(str, Enum):
    """用户角色

    Attributes:
        USER: 普通用户，提交本人确认照片
        ADMIN: 管理员，审核本人确认请求
    """

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def create(cls, value: Any) -> Result["UserRole", InvalidValueObjectException]:
        """校验工厂，未知角色返回 Err"""
        try:
            return Ok(cls(value))
        except ValueError:
            return Err(
                InvalidValueObjectException(
                    value_object_type="UserRole",
                    value=value,
                    reason="Invalid user role",
                )
            )

    def __str__(self) -> str:
        return self.value
