"""审核本人确认请求命令"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from domain.common.value_objects.numeric_id import NumericId
from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.repositories.verification_request_repository import (
    VerificationRequestRepository,
)

REVIEW_ACTIONS = ("approve", "reject")
REVIEWED_STATES = {"approve": "approved", "reject": "rejected"}


@dataclass
class ReviewVerificationRequestCommand:
    """审核本人确认请求命令

    Attributes:
        request_id: 请求 ID（路径参数原始值）
        action: approve / reject
        admin_id: 审核管理员 ID
        comment: 审核备注（reject 时必填）
    """

    request_id: Any
    action: Optional[str]
    admin_id: Any
    comment: Optional[str] = None


@dataclass
class ReviewVerificationRequestResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        request: 审核后的请求（成功时有值）
        message: 结果消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    request: Optional[VerificationRequest] = None
    message: str = ""
    error_code: Optional[str] = None


class ReviewVerificationRequestHandler:
    """审核本人确认请求处理器

    按顺序校验：请求 ID、管理员 ID、动作、驳回理由、管理员身份与权限、
    请求是否存在，最后执行状态迁移并保存。
    """

    def __init__(
        self,
        user_repo: UserRepository,
        request_repo: VerificationRequestRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._user_repo = user_repo
        self._request_repo = request_repo
        self._logger = logger or logging.getLogger(__name__)

    def handle(
        self, command: ReviewVerificationRequestCommand
    ) -> ReviewVerificationRequestResult:
        """
        处理审核命令

        Args:
            command: 审核本人确认请求命令

        Returns:
            命令执行结果
        """
        self._logger.info(
            f"Processing review: request_id={command.request_id}, "
            f"action={command.action}, admin_id={command.admin_id}"
        )

        # 1. 输入校验
        request_id = NumericId.create(command.request_id)
        if not request_id.ok:
            return self._fail("A valid request ID is required", "INVALID_REQUEST_ID")

        if command.admin_id is None or command.admin_id == "":
            return self._fail("Admin ID is required", "MISSING_ADMIN_ID")

        if command.action not in REVIEW_ACTIONS:
            return self._fail(
                "Action must be either approve or reject", "INVALID_ACTION"
            )

        if command.action == "reject" and (
            not command.comment or not command.comment.strip()
        ):
            return self._fail("Rejection reason is required", "MISSING_COMMENT")

        # 2. 管理员
        admin_id = UserId.create(command.admin_id)
        if not admin_id.ok:
            return self._fail("Invalid admin ID", "INVALID_ADMIN_ID")

        admin = self._user_repo.find_by_id(admin_id.value)
        if not admin.ok:
            self._logger.error(f"Failed to load admin {admin_id.value}: {admin.error!r}")
            return self._fail("Failed to load user", "REPOSITORY_ERROR")
        if admin.value is None:
            return self._fail("User not found", "ADMIN_NOT_FOUND")
        if not admin.value.is_admin:
            self._logger.warning(f"User {admin_id.value} attempted review without admin role")
            return self._fail("Admin privileges are required", "FORBIDDEN")

        # 3. 请求
        found = self._request_repo.find_by_id(request_id.value.value)
        if not found.ok:
            self._logger.error(
                f"Failed to load verification request {request_id.value}: {found.error!r}"
            )
            return self._fail("Failed to load verification request", "REPOSITORY_ERROR")
        if found.value is None:
            return self._fail("Verification request not found", "REQUEST_NOT_FOUND")

        # 4. 状态迁移
        if command.action == "approve":
            transition = found.value.approve(admin_id.value, command.comment)
        else:
            transition = found.value.reject(admin_id.value, command.comment or "")

        if not transition.ok:
            self._logger.warning(
                f"Rejected transition for request {request_id.value}: {transition.error}"
            )
            return self._fail(transition.error.message, "INVALID_TRANSITION")

        # 5. 保存
        saved = self._request_repo.save(transition.value)
        if not saved.ok:
            self._logger.error(
                f"Failed to save verification request {request_id.value}: {saved.error!r}"
            )
            return self._fail("Failed to save verification request", "REPOSITORY_ERROR")

        self._logger.info(
            f"Verification request reviewed: request_id={saved.value.id}, "
            f"status={saved.value.status.value}, admin_id={admin_id.value}"
        )
        return ReviewVerificationRequestResult(
            success=True,
            request=saved.value,
            message=f"Verification request {REVIEWED_STATES[command.action]}",
        )

    def _fail(self, message: str, error_code: str) -> ReviewVerificationRequestResult:
        return ReviewVerificationRequestResult(
            success=False,
            message=message,
            error_code=error_code,
        )
