"""实体基类"""

from dataclasses import dataclass, field, replace
from typing import Any, TypeVar

from domain.common.value_objects.date_time import DateTime

E = TypeVar("E", bound="BaseEntity")
T = TypeVar("T", bound="TimestampedEntity")


@dataclass(frozen=True, kw_only=True)
class BaseEntity:
    """实体基类

    实体不可变：任何状态变化都通过 evolve() 生成新版本，
    由调用方负责持久化新版本替换旧版本。

    Attributes:
        created_at: 创建时间
    """

    created_at: DateTime = field(default_factory=DateTime.now)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """子类覆写：校验失败时抛出 DomainException 子类"""

    def evolve(self: E, **changes: Any) -> E:
        """返回应用了 changes 的新实体（重新执行校验）"""
        return replace(self, **changes)


@dataclass(frozen=True, kw_only=True)
class TimestampedEntity(BaseEntity):
    """会被修改的实体，额外记录最后更新时间

    Attributes:
        updated_at: 最后更新时间
    """

    updated_at: DateTime = field(default_factory=DateTime.now)

    def touch(self: T, **changes: Any) -> T:
        """同 evolve()，并刷新 updated_at"""
        return self.evolve(updated_at=DateTime.now(), **changes)
