"""创建本人确认请求命令"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.repositories.verification_request_repository import (
    VerificationRequestRepository,
)
from domain.verification.value_objects.image_id import ImageId


@dataclass
class CreateVerificationRequestCommand:
    """创建本人确认请求命令

    Attributes:
        user_id: 申请者 ID（原始输入）
        image_id: 确认照片 ID（原始输入）
    """

    user_id: Any
    image_id: Any


@dataclass
class CreateVerificationRequestResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        request: 创建的请求（成功时有值）
        message: 结果消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    request: Optional[VerificationRequest] = None
    message: str = ""
    error_code: Optional[str] = None


class CreateVerificationRequestHandler:
    """创建本人确认请求处理器

    1. 校验并加载申请者
    2. 校验并加载确认照片
    3. 检查同一照片是否已有请求
    4. 创建 PENDING 请求并保存
    """

    def __init__(
        self,
        user_repo: UserRepository,
        image_repo: VerificationImageRepository,
        request_repo: VerificationRequestRepository,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            user_repo: 用户仓储
            image_repo: 确认照片仓储
            request_repo: 确认请求仓储
            logger: 日志记录器
        """
        self._user_repo = user_repo
        self._image_repo = image_repo
        self._request_repo = request_repo
        self._logger = logger or logging.getLogger(__name__)

    def handle(
        self, command: CreateVerificationRequestCommand
    ) -> CreateVerificationRequestResult:
        """
        处理创建请求命令

        Args:
            command: 创建本人确认请求命令

        Returns:
            命令执行结果
        """
        self._logger.info(
            f"Processing create verification request: user_id={command.user_id}, "
            f"image_id={command.image_id}"
        )

        if not command.user_id or not command.image_id:
            return self._fail("User ID and image ID are required", "MISSING_FIELDS")

        # 1. 申请者
        user_id = UserId.create(command.user_id)
        if not user_id.ok:
            return self._fail(user_id.error.message, "INVALID_USER_ID")

        user = self._user_repo.find_by_id(user_id.value)
        if not user.ok:
            self._logger.error(f"Failed to load user {user_id.value}: {user.error!r}")
            return self._fail("Failed to load user", "REPOSITORY_ERROR")
        if user.value is None:
            return self._fail("User not found", "USER_NOT_FOUND")

        # 2. 确认照片
        image_id = ImageId.create(command.image_id)
        if not image_id.ok:
            return self._fail(image_id.error.message, "INVALID_IMAGE_ID")

        image = self._image_repo.find_by_id(image_id.value)
        if not image.ok:
            self._logger.error(f"Failed to load image {image_id.value}: {image.error!r}")
            return self._fail("Failed to load image", "REPOSITORY_ERROR")
        if image.value is None:
            return self._fail("Image not found", "IMAGE_NOT_FOUND")

        # 3. 重复检查
        existing = self._request_repo.find_by_image_id(image_id.value)
        if not existing.ok:
            self._logger.error(
                f"Failed to check existing requests for image {image_id.value}: "
                f"{existing.error!r}"
            )
            return self._fail("Failed to load verification requests", "REPOSITORY_ERROR")
        if existing.value:
            self._logger.warning(f"Duplicate verification request for image {image_id.value}")
            return self._fail(
                "A verification request already exists for this image",
                "DUPLICATE_REQUEST",
            )

        # 4. 创建并保存
        request = VerificationRequest.create_pending(
            user_id=user_id.value,
            image_id=image_id.value,
        )
        saved = self._request_repo.save(request)
        if not saved.ok:
            self._logger.error(f"Failed to save verification request: {saved.error!r}")
            return self._fail("Failed to save verification request", "REPOSITORY_ERROR")

        self._logger.info(
            f"Verification request created: request_id={saved.value.id}, "
            f"user_id={user_id.value}, image_id={image_id.value}"
        )
        return CreateVerificationRequestResult(
            success=True,
            request=saved.value,
            message="Verification request created successfully",
        )

    def _fail(self, message: str, error_code: str) -> CreateVerificationRequestResult:
        return CreateVerificationRequestResult(
            success=False,
            message=message,
            error_code=error_code,
        )
