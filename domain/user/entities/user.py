"""用户实体"""

from dataclasses import dataclass

from domain.common.base_entity import TimestampedEntity
from domain.common.exceptions import DomainException, InvalidOperationException
from domain.common.result import Err, Ok, Result
from domain.common.value_objects.date_time import DateTime
from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId
from domain.user.value_objects.user_role import UserRole


@dataclass(frozen=True, kw_only=True)
class User(TimestampedEntity):
    """用户实体

    Attributes:
        id: 用户 ID
        email: 邮箱地址
        name: 用户名（非空）
        role: 用户角色
    """

    id: UserId
    email: Email
    name: str
    role: UserRole = UserRole.USER

    def _validate(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidOperationException(
                operation="create_user",
                reason="Name cannot be empty",
            )

    @classmethod
    def create(
        cls,
        id: UserId,
        email: Email,
        name: str,
        role: UserRole = UserRole.USER,
        created_at: DateTime | None = None,
        updated_at: DateTime | None = None,
    ) -> Result["User", DomainException]:
        """工厂方法创建用户

        Returns:
            Ok(User) 或 Err(InvalidOperationException)
        """
        now = DateTime.now()
        try:
            return Ok(
                cls(
                    id=id,
                    email=email,
                    name=name,
                    role=role,
                    created_at=created_at or now,
                    updated_at=updated_at or now,
                )
            )
        except InvalidOperationException as e:
            return Err(e)

    @property
    def is_admin(self) -> bool:
        """是否为管理员"""
        return self.role == UserRole.ADMIN

    def change_role(self, new_role: UserRole) -> Result["User", DomainException]:
        """变更角色，返回新用户"""
        return Ok(self.touch(role=new_role))

    def change_name(self, new_name: str) -> Result["User", DomainException]:
        """变更用户名，返回新用户

        Returns:
            Ok(User) 或 Err(InvalidOperationException)（新名称为空）
        """
        if not new_name or not new_name.strip():
            return Err(
                InvalidOperationException(
                    operation="change_name",
                    reason="Name cannot be empty",
                )
            )
        return Ok(self.touch(name=new_name))
