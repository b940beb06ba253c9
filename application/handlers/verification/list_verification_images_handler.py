"""查询确认照片列表 Handler"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.queries.verification.list_verification_images import (
    ListVerificationImagesQuery,
)
from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.value_objects.image_id import ImageId


@dataclass
class ListVerificationImagesResult:
    """查询结果

    Attributes:
        success: 是否成功
        images: 照片列表
        message: 失败消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    images: List[VerificationImage] = field(default_factory=list)
    message: str = ""
    error_code: Optional[str] = None


class ListVerificationImagesHandler:
    """查询确认照片列表 Handler

    按照片 ID 查询时返回单张；按用户查询时用户必须存在且至少有一张照片。
    """

    def __init__(
        self,
        user_repo: UserRepository,
        image_repo: VerificationImageRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._user_repo = user_repo
        self._image_repo = image_repo
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, query: ListVerificationImagesQuery) -> ListVerificationImagesResult:
        self._logger.debug(
            f"Handling ListVerificationImagesQuery: user_id={query.user_id}, "
            f"image_id={query.image_id}"
        )

        if query.image_id:
            return self._by_image_id(query.image_id)
        if query.user_id:
            return self._by_user_id(query.user_id)

        return self._fail("A userId or imageId filter is required", "MISSING_FILTER")

    def _by_image_id(self, raw_image_id: str) -> ListVerificationImagesResult:
        image_id = ImageId.create(raw_image_id)
        if not image_id.ok:
            return self._fail(image_id.error.message, "INVALID_IMAGE_ID")

        found = self._image_repo.find_by_id(image_id.value)
        if not found.ok:
            self._logger.error(f"Failed to load image {image_id.value}: {found.error!r}")
            return self._fail("Failed to load images", "REPOSITORY_ERROR")
        if found.value is None:
            return self._fail("Image not found", "IMAGE_NOT_FOUND")

        return ListVerificationImagesResult(success=True, images=[found.value])

    def _by_user_id(self, raw_user_id: str) -> ListVerificationImagesResult:
        user_id = UserId.create(raw_user_id)
        if not user_id.ok:
            return self._fail(user_id.error.message, "INVALID_USER_ID")

        user = self._user_repo.find_by_id(user_id.value)
        if not user.ok:
            self._logger.error(f"Failed to load user {user_id.value}: {user.error!r}")
            return self._fail("Failed to load user", "REPOSITORY_ERROR")
        if user.value is None:
            return self._fail("User not found", "USER_NOT_FOUND")

        images = self._image_repo.find_by_user_id(user_id.value)
        if not images.ok:
            self._logger.error(
                f"Failed to load images for user {user_id.value}: {images.error!r}"
            )
            return self._fail("Failed to load images", "REPOSITORY_ERROR")
        if not images.value:
            return self._fail("Image not found", "IMAGE_NOT_FOUND")

        return ListVerificationImagesResult(success=True, images=images.value)

    def _fail(self, message: str, error_code: str) -> ListVerificationImagesResult:
        return ListVerificationImagesResult(
            success=False,
            message=message,
            error_code=error_code,
        )
