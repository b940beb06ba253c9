"""本人确认请求实体"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_entity import TimestampedEntity
from domain.common.exceptions import (
    InvalidOperationException,
    InvalidStateTransitionException,
)
from domain.common.result import Err, Ok, Result
from domain.common.value_objects.date_time import DateTime
from domain.user.value_objects.user_id import UserId
from domain.verification.value_objects.image_id import ImageId
from domain.verification.value_objects.verification_status import VerificationStatus


@dataclass(frozen=True, kw_only=True)
class VerificationRequest(TimestampedEntity):
    """本人确认请求实体

    状态只能从 PENDING 单向迁移到 APPROVED 或 REJECTED。
    approve() / reject() 不修改自身，而是返回新实体。

    Attributes:
        id: 请求 ID（0 表示尚未持久化）
        user_id: 申请者
        image_id: 提交的确认照片
        status: 请求状态
        reviewed_by: 审核管理员（仅非 PENDING 时有值）
        reviewed_at: 审核时间（仅非 PENDING 时有值）
        comment: 审核备注（REJECTED 时必填）
    """

    id: int = 0
    user_id: UserId
    image_id: ImageId
    status: VerificationStatus = VerificationStatus.PENDING
    reviewed_by: Optional[UserId] = None
    reviewed_at: Optional[DateTime] = None
    comment: Optional[str] = None

    def _validate(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 0:
            raise InvalidOperationException(
                operation="create_verification_request",
                reason="Request ID must be a non-negative integer",
            )

        if self.status == VerificationStatus.PENDING:
            if (
                self.reviewed_by is not None
                or self.reviewed_at is not None
                or self.comment is not None
            ):
                raise InvalidOperationException(
                    operation="create_verification_request",
                    reason="Pending requests cannot carry review data",
                )
            return

        if self.reviewed_by is None or self.reviewed_at is None:
            raise InvalidOperationException(
                operation="create_verification_request",
                reason="Reviewed requests must record reviewer and review time",
            )

        if self.status == VerificationStatus.REJECTED and (
            not self.comment or not self.comment.strip()
        ):
            raise InvalidOperationException(
                operation="create_verification_request",
                reason="Rejection reason is required",
            )

    @classmethod
    def create_pending(
        cls,
        user_id: UserId,
        image_id: ImageId,
        id: int = 0,
    ) -> "VerificationRequest":
        """创建待审核请求

        Args:
            user_id: 申请者 ID
            image_id: 确认照片 ID
            id: 请求 ID，默认 0（由存储分配）

        Returns:
            状态为 PENDING 的新请求
        """
        now = DateTime.now()
        return cls(
            id=id,
            user_id=user_id,
            image_id=image_id,
            status=VerificationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def approve(
        self,
        admin_id: UserId,
        comment: Optional[str] = None,
    ) -> Result["VerificationRequest", InvalidStateTransitionException]:
        """批准请求

        Args:
            admin_id: 审核管理员 ID
            comment: 审核备注（可选，为空时保留原备注）

        Returns:
            Ok(已批准的新请求) 或 Err(InvalidStateTransitionException)
        """
        if self.status != VerificationStatus.PENDING:
            return Err(
                InvalidStateTransitionException(
                    entity="VerificationRequest",
                    from_state=self.status.value,
                    to_state=VerificationStatus.APPROVED.value,
                    reason="Only pending requests can be approved",
                )
            )

        now = DateTime.now()
        return Ok(
            self.evolve(
                status=VerificationStatus.APPROVED,
                reviewed_by=admin_id,
                reviewed_at=now,
                comment=comment or self.comment,
                updated_at=now,
            )
        )

    def reject(
        self,
        admin_id: UserId,
        comment: str,
    ) -> Result["VerificationRequest", InvalidStateTransitionException]:
        """驳回请求

        先检查状态，再检查驳回理由。

        Args:
            admin_id: 审核管理员 ID
            comment: 驳回理由（必填）

        Returns:
            Ok(已驳回的新请求) 或 Err(InvalidStateTransitionException)
        """
        if self.status != VerificationStatus.PENDING:
            return Err(
                InvalidStateTransitionException(
                    entity="VerificationRequest",
                    from_state=self.status.value,
                    to_state=VerificationStatus.REJECTED.value,
                    reason="Only pending requests can be rejected",
                )
            )

        if not comment or not comment.strip():
            return Err(
                InvalidStateTransitionException(
                    entity="VerificationRequest",
                    from_state=self.status.value,
                    to_state=VerificationStatus.REJECTED.value,
                    reason="Rejection reason is required",
                )
            )

        now = DateTime.now()
        return Ok(
            self.evolve(
                status=VerificationStatus.REJECTED,
                reviewed_by=admin_id,
                reviewed_at=now,
                comment=comment,
                updated_at=now,
            )
        )

    @property
    def is_pending(self) -> bool:
        """是否待审核"""
        return self.status == VerificationStatus.PENDING

    @property
    def is_approved(self) -> bool:
        """是否已批准"""
        return self.status == VerificationStatus.APPROVED

    @property
    def is_rejected(self) -> bool:
        """是否已驳回"""
        return self.status == VerificationStatus.REJECTED
