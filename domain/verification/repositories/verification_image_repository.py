"""确认照片仓储接口"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.common.repository_error import RepositoryError
from domain.common.result import Result
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.value_objects.image_id import ImageId


class VerificationImageRepository(ABC):
    """
    确认照片仓储接口

    定义确认照片的持久化操作契约。
    具体实现在 infrastructure 层。
    """

    @abstractmethod
    def find_by_id(
        self, image_id: ImageId
    ) -> Result[Optional[VerificationImage], RepositoryError]:
        """按 ID 获取照片，不存在时 Ok(None)"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(
        self, user_id: UserId
    ) -> Result[List[VerificationImage], RepositoryError]:
        """获取用户提交的所有照片"""
        raise NotImplementedError

    @abstractmethod
    def save(self, image: VerificationImage) -> Result[VerificationImage, RepositoryError]:
        """
        保存照片（upsert）

        Args:
            image: 照片实体，ID 为 "0" 时由存储分配主键

        Returns:
            带有最终 ID 的照片实体
        """
        raise NotImplementedError
