"""值对象基类"""

from dataclasses import dataclass
from typing import Any, TypeVar

from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Ok, Result

V = TypeVar("V", bound="BaseValueObject")


@dataclass(frozen=True)
class BaseValueObject:
    """值对象基类

    - 不可变（frozen dataclass）
    - 按值比较
    - 构造后自动调用 validate()，非法输入无法得到实例
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """子类覆写：校验失败时抛出 InvalidValueObjectException"""

    @classmethod
    def create(cls: type[V], *args: Any, **kwargs: Any) -> Result[V, InvalidValueObjectException]:
        """校验工厂，不抛异常

        Returns:
            Ok(实例) 或 Err(InvalidValueObjectException)
        """
        try:
            return Ok(cls(*args, **kwargs))
        except InvalidValueObjectException as e:
            return Err(e)
