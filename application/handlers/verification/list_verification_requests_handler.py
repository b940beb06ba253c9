"""查询本人确认请求列表 Handler"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.queries.verification.list_verification_requests import (
    ListVerificationRequestsQuery,
)
from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.repositories.verification_request_repository import (
    VerificationRequestRepository,
)
from domain.verification.value_objects.verification_status import VerificationStatus


@dataclass
class VerificationRequestItem:
    """列表项：请求及其照片 URL

    Attributes:
        request: 本人确认请求
        image_url: 照片 URL（照片缺失或读取失败时为 None）
    """

    request: VerificationRequest
    image_url: Optional[str] = None


@dataclass
class ListVerificationRequestsResult:
    """查询结果

    Attributes:
        success: 是否成功
        items: 请求列表
        message: 失败消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    items: List[VerificationRequestItem] = field(default_factory=list)
    message: str = ""
    error_code: Optional[str] = None


class ListVerificationRequestsHandler:
    """查询本人确认请求列表 Handler

    纯读取操作。按状态或申请者过滤，并为每个请求附带照片 URL。
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

    def handle(self, query: ListVerificationRequestsQuery) -> ListVerificationRequestsResult:
        """处理查询请求

        Args:
            query: 查询对象

        Returns:
            ListVerificationRequestsResult
        """
        self._logger.debug(
            f"Handling ListVerificationRequestsQuery: status={query.status}, "
            f"user_id={query.user_id}"
        )

        if query.status:
            status = VerificationStatus.create(query.status)
            if not status.ok:
                return self._fail("Invalid status value", "INVALID_STATUS")
            found = self._request_repo.find_by_status(status.value)
        elif query.user_id:
            user_id = UserId.create(query.user_id)
            if not user_id.ok:
                return self._fail(user_id.error.message, "INVALID_USER_ID")

            user = self._user_repo.find_by_id(user_id.value)
            if not user.ok:
                self._logger.error(f"Failed to load user {user_id.value}: {user.error!r}")
                return self._fail("Failed to load user", "REPOSITORY_ERROR")
            if user.value is None:
                return self._fail("User not found", "USER_NOT_FOUND")

            found = self._request_repo.find_by_user_id(user_id.value)
        else:
            return self._fail("A status or userId filter is required", "MISSING_FILTER")

        if not found.ok:
            self._logger.error(f"Failed to load verification requests: {found.error!r}")
            return self._fail("Failed to load verification requests", "REPOSITORY_ERROR")

        items = [
            VerificationRequestItem(request=request, image_url=self._image_url(request))
            for request in found.value
        ]
        return ListVerificationRequestsResult(success=True, items=items)

    def _image_url(self, request: VerificationRequest) -> Optional[str]:
        image = self._image_repo.find_by_id(request.image_id)
        if not image.ok:
            self._logger.warning(
                f"Failed to load image {request.image_id} for request {request.id}: "
                f"{image.error!r}"
            )
            return None
        return image.value.image_url if image.value else None

    def _fail(self, message: str, error_code: str) -> ListVerificationRequestsResult:
        return ListVerificationRequestsResult(
            success=False,
            message=message,
            error_code=error_code,
        )
