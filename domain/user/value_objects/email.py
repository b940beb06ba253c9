"""邮箱地址值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class Email(BaseValueObject):
    """邮箱地址，只要求包含 @"""

    value: str

    def validate(self) -> None:
        if not isinstance(self.value, str) or "@" not in self.value:
            raise InvalidValueObjectException(
                value_object_type="Email",
                value=self.value,
                reason="Invalid email format",
            )

    def __str__(self) -> str:
        return self.value
