"""本人确认请求 SQLAlchemy 数据模型"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VerificationRequestModel(Base):
    """
    本人确认请求数据库模型

    对应领域层的 VerificationRequest 实体
    """

    __tablename__ = "verification_requests"

    # 主键
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # 关联信息
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    image_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("verification_images.id"), nullable=False, index=True
    )

    # 状态
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="PENDING", index=True
    )

    # 审核信息
    reviewed_by_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True
    )
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # 时间戳
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    def __repr__(self) -> str:
        return (
            f"<VerificationRequestModel(id={self.id}, user_id={self.user_id}, "
            f"image_id={self.image_id}, status={self.status})>"
        )
