"""Result 类型

领域操作不通过抛异常表达预期失败，而是返回 Ok / Err。

用法：
    result = UserId.create(raw)
    if not result.ok:
        return result          # 原样向上传递
    user_id = result.value
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """成功结果"""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """失败结果"""

    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """取值失败时抛出错误载荷（载荷为异常时直接抛出）"""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap() on Err: {self.error!r}")


Result = Union[Ok[T], Err[E]]


__all__ = ["Ok", "Err", "Result"]
