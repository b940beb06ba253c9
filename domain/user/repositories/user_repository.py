"""用户仓储接口"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.common.repository_error import RepositoryError
from domain.common.result import Result
from domain.user.entities.user import User
from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId


class UserRepository(ABC):
    """
    用户仓储接口

    所有方法以 Result 返回，持久化失败表现为 Err(RepositoryError)。
    具体实现在基础设施层。
    """

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> Result[Optional[User], RepositoryError]:
        """
        根据 ID 获取用户

        Returns:
            Ok(User)，不存在时 Ok(None)
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: Email) -> Result[Optional[User], RepositoryError]:
        """根据邮箱获取用户，不存在时 Ok(None)"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> Result[List[User], RepositoryError]:
        """获取所有用户"""
        raise NotImplementedError

    @abstractmethod
    def save(self, user: User) -> Result[User, RepositoryError]:
        """
        保存用户（upsert，按 ID）

        Returns:
            保存后的用户；邮箱重复时 Err(DUPLICATE_EMAIL)
        """
        raise NotImplementedError
