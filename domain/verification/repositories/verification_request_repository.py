"""本人确认请求仓储接口"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.common.repository_error import RepositoryError
from domain.common.result import Result
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.value_objects.image_id import ImageId
from domain.verification.value_objects.verification_status import VerificationStatus


class VerificationRequestRepository(ABC):
    """
    本人确认请求仓储接口

    定义确认请求的持久化操作契约。
    具体实现在 infrastructure 层。
    """

    @abstractmethod
    def find_by_id(
        self, request_id: int
    ) -> Result[Optional[VerificationRequest], RepositoryError]:
        """按 ID 获取请求，不存在时 Ok(None)"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(
        self, user_id: UserId
    ) -> Result[List[VerificationRequest], RepositoryError]:
        """获取用户的所有请求"""
        raise NotImplementedError

    @abstractmethod
    def find_by_status(
        self, status: VerificationStatus
    ) -> Result[List[VerificationRequest], RepositoryError]:
        """按状态获取请求"""
        raise NotImplementedError

    @abstractmethod
    def find_by_image_id(
        self, image_id: ImageId
    ) -> Result[List[VerificationRequest], RepositoryError]:
        """获取引用某张照片的请求（用于重复检查）"""
        raise NotImplementedError

    @abstractmethod
    def save(
        self, request: VerificationRequest
    ) -> Result[VerificationRequest, RepositoryError]:
        """
        保存请求（upsert，按 ID）

        Args:
            request: 请求实体，ID 为 0 时由存储分配主键

        Returns:
            带有最终 ID 的请求实体
        """
        raise NotImplementedError
