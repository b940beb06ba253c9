"""确认照片 SQLAlchemy 数据模型"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VerificationImageModel(Base):
    """
    确认照片数据库模型

    对应领域层的 VerificationImage 实体。
    image_url 通常是 data URL，使用 Text 存储。
    """

    __tablename__ = "verification_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    def __repr__(self) -> str:
        return f"<VerificationImageModel(id={self.id}, user_id={self.user_id})>"
