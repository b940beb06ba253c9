"""确认照片 SQLAlchemy 仓储实现"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.common.repository_error import RepositoryError
from domain.common.result import Err, Ok, Result
from domain.common.value_objects.date_time import DateTime
from domain.common.value_objects.numeric_id import NumericId
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.value_objects.image_id import ImageId
from infrastructure.verification.models.verification_image_model import (
    VerificationImageModel,
)


class SqlAlchemyVerificationImageRepository(VerificationImageRepository):
    """
    确认照片 SQLAlchemy 仓储实现

    提供确认照片的持久化操作
    """

    def __init__(self, session: Session, logger: Optional[logging.Logger] = None):
        self._session = session
        self._logger = logger or logging.getLogger(__name__)

    def find_by_id(
        self, image_id: ImageId
    ) -> Result[Optional[VerificationImage], RepositoryError]:
        """按 ID 获取照片"""
        numeric_id = NumericId.create(image_id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        try:
            model = (
                self._session.query(VerificationImageModel)
                .filter(VerificationImageModel.id == numeric_id.value.value)
                .first()
            )
            if model is None:
                return Ok(None)
            return self._to_entity(model)
        except SQLAlchemyError as e:
            return Err(self._database_error("find_by_id", e))
        finally:
            self._session.close()

    def find_by_user_id(
        self, user_id: UserId
    ) -> Result[List[VerificationImage], RepositoryError]:
        """获取用户提交的所有照片（按创建时间升序）"""
        numeric_id = NumericId.create(user_id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        try:
            models = (
                self._session.query(VerificationImageModel)
                .filter(VerificationImageModel.user_id == numeric_id.value.value)
                .order_by(VerificationImageModel.created_at.asc())
                .all()
            )

            images: List[VerificationImage] = []
            for model in models:
                result = self._to_entity(model)
                if not result.ok:
                    return result
                images.append(result.value)
            return Ok(images)
        except SQLAlchemyError as e:
            return Err(self._database_error("find_by_user_id", e))
        finally:
            self._session.close()

    def save(self, image: VerificationImage) -> Result[VerificationImage, RepositoryError]:
        """保存照片（ID 为 "0" 时新增）"""
        numeric_id = NumericId.create(image.id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())
        numeric_user_id = NumericId.create(image.user_id)
        if not numeric_user_id.ok:
            return Err(RepositoryError.invalid_id_format("userIdの形式が不正です"))

        try:
            model = None
            if not numeric_id.value.is_unassigned:
                model = (
                    self._session.query(VerificationImageModel)
                    .filter(VerificationImageModel.id == numeric_id.value.value)
                    .first()
                )

            if model is None:
                model = VerificationImageModel(
                    user_id=numeric_user_id.value.value,
                    image_url=image.image_url,
                    created_at=image.created_at.value,
                )
                if not numeric_id.value.is_unassigned:
                    model.id = numeric_id.value.value
                self._session.add(model)
            else:
                model.user_id = numeric_user_id.value.value
                model.image_url = image.image_url

            self._session.commit()
            return self._to_entity(model)
        except SQLAlchemyError as e:
            return Err(self._database_error("save", e))
        finally:
            self._session.close()

    def _to_entity(
        self, model: VerificationImageModel
    ) -> Result[VerificationImage, RepositoryError]:
        """将数据模型转换为领域实体"""
        image_id = ImageId.create(model.id)
        if not image_id.ok:
            return Err(RepositoryError.invalid_data("id"))
        user_id = UserId.create(model.user_id)
        if not user_id.ok:
            return Err(RepositoryError.invalid_data("userId"))
        created_at = DateTime.create(model.created_at)
        if not created_at.ok:
            return Err(RepositoryError.invalid_data("createdAt"))

        image = VerificationImage.create(
            id=image_id.value,
            user_id=user_id.value,
            image_url=model.image_url,
            created_at=created_at.value,
        )
        if not image.ok:
            self._logger.error(f"Failed to map image row {model.id}: {image.error}")
            return Err(RepositoryError.mapping_error(image.error))
        return image

    def _database_error(self, operation: str, cause: SQLAlchemyError) -> RepositoryError:
        self._session.rollback()
        self._logger.error(f"Image repository {operation} failed: {cause}")
        return RepositoryError.database_error(cause)
