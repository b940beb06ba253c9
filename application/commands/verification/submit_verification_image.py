"""提交确认照片命令"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.repositories.verification_request_repository import (
    VerificationRequestRepository,
)
from domain.verification.value_objects.image_id import ImageId

DEFAULT_MIME_TYPE = "image/jpeg"
_DATA_URL_PATTERN = re.compile(r"^data:([A-Za-z\-+/]+);base64,(.+)$", re.DOTALL)


def normalize_image_data(image: str) -> str:
    """
    规范化照片数据为 data URL

    - data:<mime>;base64,<payload> 原样拆分后重组
    - 其他 data: 前缀取逗号后的部分作为 payload
    - 纯 base64 按 image/jpeg 处理

    Args:
        image: 客户端提交的照片数据

    Returns:
        data:<mime>;base64,<payload>
    """
    mime_type = DEFAULT_MIME_TYPE
    payload = image

    if image.startswith("data:"):
        match = _DATA_URL_PATTERN.match(image)
        if match:
            mime_type, payload = match.group(1), match.group(2)
        else:
            payload = image.split(",", 1)[1] if "," in image else ""

    return f"data:{mime_type};base64,{payload}"


@dataclass
class SubmitVerificationImageCommand:
    """提交确认照片命令

    Attributes:
        user_id: 提交者 ID（原始输入）
        image: base64 照片或 data URL
    """

    user_id: Any
    image: Optional[str]


@dataclass
class SubmitVerificationImageResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        image: 保存的照片（成功时有值）
        request: 同时创建的 PENDING 请求（成功时有值）
        message: 结果消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    image: Optional[VerificationImage] = None
    request: Optional[VerificationRequest] = None
    message: str = ""
    error_code: Optional[str] = None


class SubmitVerificationImageHandler:
    """提交确认照片处理器

    保存照片后立即为其创建一个 PENDING 的本人确认请求。
    """

    def __init__(
        self,
        user_repo: UserRepository,
        image_repo: VerificationImageRepository,
        request_repo: VerificationRequestRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._user_repo = user_repo
        self._image_repo = image_repo
        self._request_repo = request_repo
        self._logger = logger or logging.getLogger(__name__)

    def handle(
        self, command: SubmitVerificationImageCommand
    ) -> SubmitVerificationImageResult:
        """
        处理提交照片命令

        Args:
            command: 提交确认照片命令

        Returns:
            命令执行结果
        """
        self._logger.info(f"Processing image submission: user_id={command.user_id}")

        if command.user_id is None or command.user_id == "":
            return self._fail("User ID is required", "MISSING_USER_ID")
        if not command.image:
            return self._fail("Image data is required", "MISSING_IMAGE")

        user_id = UserId.create(command.user_id)
        if not user_id.ok:
            return self._fail(user_id.error.message, "INVALID_USER_ID")

        user = self._user_repo.find_by_id(user_id.value)
        if not user.ok:
            self._logger.error(f"Failed to load user {user_id.value}: {user.error!r}")
            return self._fail("Failed to load user", "REPOSITORY_ERROR")
        if user.value is None:
            return self._fail("User not found", "USER_NOT_FOUND")

        # ID "0" 表示由存储分配
        image = VerificationImage.create(
            id=ImageId("0"),
            user_id=user_id.value,
            image_url=normalize_image_data(command.image),
        )
        if not image.ok:
            return self._fail(image.error.message, "INVALID_IMAGE")

        saved_image = self._image_repo.save(image.value)
        if not saved_image.ok:
            self._logger.error(f"Failed to save image: {saved_image.error!r}")
            return self._fail("Failed to save image", "REPOSITORY_ERROR")

        request = VerificationRequest.create_pending(
            user_id=user_id.value,
            image_id=saved_image.value.id,
        )
        saved_request = self._request_repo.save(request)
        if not saved_request.ok:
            self._logger.error(
                f"Failed to save verification request: {saved_request.error!r}"
            )
            return self._fail("Failed to save verification request", "REPOSITORY_ERROR")

        self._logger.info(
            f"Verification image submitted: image_id={saved_image.value.id}, "
            f"request_id={saved_request.value.id}, user_id={user_id.value}"
        )
        return SubmitVerificationImageResult(
            success=True,
            image=saved_image.value,
            request=saved_request.value,
            message="Verification image submitted",
        )

    def _fail(self, message: str, error_code: str) -> SubmitVerificationImageResult:
        return SubmitVerificationImageResult(
            success=False,
            message=message,
            error_code=error_code,
        )
