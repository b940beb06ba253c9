"""查询单张确认照片 Handler"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.queries.verification.get_verification_image import (
    GetVerificationImageQuery,
)
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.value_objects.image_id import ImageId


@dataclass
class GetVerificationImageResult:
    """查询结果

    Attributes:
        success: 是否成功
        image: 照片（成功时有值）
        message: 失败消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    image: Optional[VerificationImage] = None
    message: str = ""
    error_code: Optional[str] = None


class GetVerificationImageHandler:
    """查询单张确认照片 Handler"""

    def __init__(
        self,
        image_repo: VerificationImageRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._image_repo = image_repo
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, query: GetVerificationImageQuery) -> GetVerificationImageResult:
        image_id = ImageId.create(query.image_id)
        if not image_id.ok:
            return GetVerificationImageResult(
                success=False,
                message=image_id.error.message,
                error_code="INVALID_IMAGE_ID",
            )

        found = self._image_repo.find_by_id(image_id.value)
        if not found.ok:
            self._logger.error(f"Failed to load image {image_id.value}: {found.error!r}")
            return GetVerificationImageResult(
                success=False,
                message="Failed to load image",
                error_code="REPOSITORY_ERROR",
            )
        if found.value is None:
            return GetVerificationImageResult(
                success=False,
                message="Image not found",
                error_code="IMAGE_NOT_FOUND",
            )

        return GetVerificationImageResult(success=True, image=found.value)
