"""确认照片实体"""

from dataclasses import dataclass

from domain.common.base_entity import BaseEntity
from domain.common.exceptions import DomainException, InvalidOperationException
from domain.common.result import Err, Ok, Result
from domain.common.value_objects.date_time import DateTime
from domain.user.value_objects.user_id import UserId
from domain.verification.value_objects.image_id import ImageId


@dataclass(frozen=True, kw_only=True)
class VerificationImage(BaseEntity):
    """确认照片实体

    用户提交的本人确认照片，创建后不再变化。

    Attributes:
        id: 照片 ID
        user_id: 提交者
        image_url: 照片 URL（通常为 data URL）
    """

    id: ImageId
    user_id: UserId
    image_url: str

    def _validate(self) -> None:
        if not self.image_url or not self.image_url.strip():
            raise InvalidOperationException(
                operation="create_verification_image",
                reason="Image URL cannot be empty",
            )

    @classmethod
    def create(
        cls,
        id: ImageId,
        user_id: UserId,
        image_url: str,
        created_at: DateTime | None = None,
    ) -> Result["VerificationImage", DomainException]:
        """工厂方法创建确认照片

        Args:
            id: 照片 ID（未持久化时为 "0"）
            user_id: 提交者 ID
            image_url: 照片 URL
            created_at: 创建时间，默认当前时间

        Returns:
            Ok(VerificationImage) 或 Err(InvalidOperationException)
        """
        created = created_at or DateTime.now()
        try:
            return Ok(
                cls(
                    id=id,
                    user_id=user_id,
                    image_url=image_url,
                    created_at=created,
                )
            )
        except InvalidOperationException as e:
            return Err(e)
