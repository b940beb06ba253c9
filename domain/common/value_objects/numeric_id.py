"""数值 ID 值对象

将字符串形式的 ID（UserId、ImageId 等）投影为存储层使用的整数主键。
"""

import math
from dataclasses import dataclass
from typing import Any

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Result

# 存储层整数主键上限（64 位有符号整数）
MAX_NUMERIC_ID = 2**63 - 1


@dataclass(frozen=True)
class NumericId(BaseValueObject):
    """非负整数 ID

    Attributes:
        value: 整数值
    """

    value: int

    def validate(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidValueObjectException(
                value_object_type="NumericId",
                value=self.value,
                reason="ID must be an integer",
            )
        if self.value < 0:
            raise InvalidValueObjectException(
                value_object_type="NumericId",
                value=self.value,
                reason="Numeric ID must be a non-negative integer",
            )
        if self.value > MAX_NUMERIC_ID:
            raise InvalidValueObjectException(
                value_object_type="NumericId",
                value=self.value,
                reason="Numeric ID is out of range",
            )

    @classmethod
    def create(cls, value: Any) -> Result["NumericId", InvalidValueObjectException]:
        """从 int / float / 数字字符串 / ID 值对象创建

        Returns:
            Ok(NumericId) 或 Err(InvalidValueObjectException)
        """
        if isinstance(value, BaseValueObject):
            value = str(value)

        if isinstance(value, bool) or value is None:
            return Err(cls._error(value, "ID cannot be interpreted as a number"))

        if isinstance(value, str):
            text = value.strip()
            try:
                number: Any = int(text)
            except ValueError:
                try:
                    number = float(text)
                except ValueError:
                    return Err(cls._error(value, "ID cannot be interpreted as a number"))
        elif isinstance(value, (int, float)):
            number = value
        else:
            return Err(cls._error(value, "ID cannot be interpreted as a number"))

        if isinstance(number, float):
            if math.isnan(number):
                return Err(cls._error(value, "ID cannot be interpreted as a number"))
            if not number.is_integer():
                return Err(cls._error(value, "ID must be an integer"))
            number = int(number)

        return super().create(number)

    @staticmethod
    def _error(value: Any, reason: str) -> InvalidValueObjectException:
        return InvalidValueObjectException(
            value_object_type="NumericId",
            value=value,
            reason=reason,
        )

    @property
    def is_unassigned(self) -> bool:
        """0 表示尚未由存储层分配主键"""
        return self.value == 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
