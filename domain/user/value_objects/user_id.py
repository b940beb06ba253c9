"""用户 ID 值对象"""

from dataclasses import dataclass
from typing import Any

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Result


@dataclass(frozen=True)
class UserId(BaseValueObject):
    """用户 ID

    非空字符串标识符。工厂方法接受任意非 None 原始值并先转为字符串。

    Attributes:
        value: ID 字符串
    """

    value: str

    def validate(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidValueObjectException(
                value_object_type="UserId",
                value=self.value,
                reason="User ID cannot be empty",
            )

    @classmethod
    def create(cls, value: Any) -> Result["UserId", InvalidValueObjectException]:
        if value is None:
            return Err(
                InvalidValueObjectException(
                    value_object_type="UserId",
                    value=None,
                    reason="User ID cannot be empty",
                )
            )

        if not isinstance(value, str):
            try:
                value = str(value)
            except Exception as e:
                return Err(
                    InvalidValueObjectException(
                        value_object_type="UserId",
                        value=repr(e),
                        reason="Cannot convert User ID to string",
                    )
                )

        return super().create(value)

    def __str__(self) -> str:
        return self.value
