"""时间戳值对象"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Ok, Result


@dataclass(frozen=True, order=True)
class DateTime(BaseValueObject):
    """时间戳值对象

    Attributes:
        value: 被包装的 datetime
    """

    value: datetime

    def validate(self) -> None:
        if not isinstance(self.value, datetime):
            raise InvalidValueObjectException(
                value_object_type="DateTime",
                value=self.value,
                reason="Invalid date",
            )

    @classmethod
    def create(cls, value: Any) -> Result["DateTime", InvalidValueObjectException]:
        """从 datetime / ISO-8601 字符串 / epoch 秒创建

        naive datetime 按 UTC 解释。NaN、无穷大和无法解析的输入返回 Err。
        """
        if isinstance(value, DateTime):
            return Ok(value)

        try:
            parsed = cls._coerce(value)
        except (TypeError, ValueError, OverflowError, OSError):
            return Err(
                InvalidValueObjectException(
                    value_object_type="DateTime",
                    value=value,
                    reason="Invalid date",
                )
            )

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return super().create(parsed)

    @staticmethod
    def _coerce(value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, bool):
            raise TypeError("bool is not a timestamp")
        if isinstance(value, (int, float)):
            if not math.isfinite(value):
                raise ValueError("timestamp is not finite")
            return datetime.fromtimestamp(value, tz=timezone.utc)
        if isinstance(value, str):
            text = value.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text)
        raise TypeError(f"Unsupported date value: {type(value).__name__}")

    @classmethod
    def now(cls) -> "DateTime":
        """当前 UTC 时间"""
        return cls(datetime.now(timezone.utc))

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.value.isoformat()
