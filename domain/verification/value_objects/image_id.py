"""画像 ID 值对象"""

from dataclasses import dataclass
from typing import Any

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Result

_EMPTY_MESSAGE = "画像IDは空にできません"


@dataclass(frozen=True)
class ImageId(BaseValueObject):
    """确认照片 ID

    非空字符串标识符，与 UserId 相同的转换规则。

    Attributes:
        value: ID 字符串
    """

    value: str

    def validate(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidValueObjectException(
                value_object_type="ImageId",
                value=self.value,
                reason=_EMPTY_MESSAGE,
            )

    @classmethod
    def create(cls, value: Any) -> Result["ImageId", InvalidValueObjectException]:
        if value is None:
            return Err(
                InvalidValueObjectException(
                    value_object_type="ImageId",
                    value=None,
                    reason=_EMPTY_MESSAGE,
                )
            )

        if not isinstance(value, str):
            try:
                value = str(value)
            except Exception:
                return Err(
                    InvalidValueObjectException(
                        value_object_type="ImageId",
                        value=None,
                        reason=_EMPTY_MESSAGE,
                    )
                )

        return super().create(value)

    def __str__(self) -> str:
        return self.value
