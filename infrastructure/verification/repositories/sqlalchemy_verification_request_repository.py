"""本人确认请求 SQLAlchemy 仓储实现"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.common.exceptions import DomainException
from domain.common.repository_error import RepositoryError
from domain.common.result import Err, Ok, Result
from domain.common.value_objects.date_time import DateTime
from domain.common.value_objects.numeric_id import NumericId
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.repositories.verification_request_repository import (
    VerificationRequestRepository,
)
from domain.verification.value_objects.image_id import ImageId
from domain.verification.value_objects.verification_status import VerificationStatus
from infrastructure.verification.models.verification_request_model import (
    VerificationRequestModel,
)


class SqlAlchemyVerificationRequestRepository(VerificationRequestRepository):
    """
    本人确认请求 SQLAlchemy 仓储实现

    save() 为 upsert，不做乐观锁校验（后写覆盖先写）。
    """

    def __init__(self, session: Session, logger: Optional[logging.Logger] = None):
        self._session = session
        self._logger = logger or logging.getLogger(__name__)

    def find_by_id(
        self, request_id: int
    ) -> Result[Optional[VerificationRequest], RepositoryError]:
        """按 ID 获取请求"""
        numeric_id = NumericId.create(request_id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        try:
            model = (
                self._session.query(VerificationRequestModel)
                .filter(VerificationRequestModel.id == numeric_id.value.value)
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
    ) -> Result[List[VerificationRequest], RepositoryError]:
        """获取用户的所有请求"""
        numeric_id = NumericId.create(user_id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        return self._find_many(
            "find_by_user_id",
            VerificationRequestModel.user_id == numeric_id.value.value,
        )

    def find_by_status(
        self, status: VerificationStatus
    ) -> Result[List[VerificationRequest], RepositoryError]:
        """按状态获取请求"""
        return self._find_many(
            "find_by_status",
            VerificationRequestModel.status == status.value,
        )

    def find_by_image_id(
        self, image_id: ImageId
    ) -> Result[List[VerificationRequest], RepositoryError]:
        """获取引用某张照片的请求"""
        numeric_id = NumericId.create(image_id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        return self._find_many(
            "find_by_image_id",
            VerificationRequestModel.image_id == numeric_id.value.value,
        )

    def save(
        self, request: VerificationRequest
    ) -> Result[VerificationRequest, RepositoryError]:
        """保存请求（ID 为 0 时新增）"""
        numeric_id = NumericId.create(request.id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())
        numeric_user_id = NumericId.create(request.user_id)
        if not numeric_user_id.ok:
            return Err(RepositoryError.invalid_id_format("userIdの形式が不正です"))
        numeric_image_id = NumericId.create(request.image_id)
        if not numeric_image_id.ok:
            return Err(RepositoryError.invalid_id_format("imageIdの形式が不正です"))

        reviewed_by_id: Optional[int] = None
        if request.reviewed_by is not None:
            numeric_reviewer = NumericId.create(request.reviewed_by)
            if not numeric_reviewer.ok:
                return Err(RepositoryError.invalid_id_format("reviewedByIdの形式が不正です"))
            reviewed_by_id = numeric_reviewer.value.value

        try:
            model = None
            if not numeric_id.value.is_unassigned:
                model = (
                    self._session.query(VerificationRequestModel)
                    .filter(VerificationRequestModel.id == numeric_id.value.value)
                    .first()
                )

            if model is None:
                model = VerificationRequestModel(created_at=request.created_at.value)
                if not numeric_id.value.is_unassigned:
                    model.id = numeric_id.value.value
                self._session.add(model)

            model.user_id = numeric_user_id.value.value
            model.image_id = numeric_image_id.value.value
            model.status = request.status.value
            model.reviewed_by_id = reviewed_by_id
            model.reviewed_at = request.reviewed_at.value if request.reviewed_at else None
            model.comment = request.comment
            model.updated_at = request.updated_at.value

            self._session.commit()
            self._logger.debug(f"Saved verification request {model.id} ({model.status})")
            return self._to_entity(model)
        except SQLAlchemyError as e:
            return Err(self._database_error("save", e))
        finally:
            self._session.close()

    def _find_many(
        self, operation: str, criterion
    ) -> Result[List[VerificationRequest], RepositoryError]:
        try:
            models = (
                self._session.query(VerificationRequestModel)
                .filter(criterion)
                .order_by(VerificationRequestModel.created_at.asc())
                .all()
            )

            requests: List[VerificationRequest] = []
            for model in models:
                result = self._to_entity(model)
                if not result.ok:
                    return result
                requests.append(result.value)
            return Ok(requests)
        except SQLAlchemyError as e:
            return Err(self._database_error(operation, e))
        finally:
            self._session.close()

    def _to_entity(
        self, model: VerificationRequestModel
    ) -> Result[VerificationRequest, RepositoryError]:
        """将数据模型转换为领域实体"""
        user_id = UserId.create(model.user_id)
        if not user_id.ok:
            return Err(RepositoryError.invalid_data("userId"))
        image_id = ImageId.create(model.image_id)
        if not image_id.ok:
            return Err(RepositoryError.invalid_data("imageId"))
        status = VerificationStatus.create(model.status)
        if not status.ok:
            return Err(RepositoryError.invalid_data("status"))

        reviewed_by: Optional[UserId] = None
        if model.reviewed_by_id is not None:
            reviewer = UserId.create(model.reviewed_by_id)
            if not reviewer.ok:
                return Err(RepositoryError.invalid_data("reviewedById"))
            reviewed_by = reviewer.value

        reviewed_at: Optional[DateTime] = None
        if model.reviewed_at is not None:
            parsed = DateTime.create(model.reviewed_at)
            if not parsed.ok:
                return Err(RepositoryError.invalid_data("reviewedAt"))
            reviewed_at = parsed.value

        created_at = DateTime.create(model.created_at)
        updated_at = DateTime.create(model.updated_at)
        if not created_at.ok or not updated_at.ok:
            return Err(RepositoryError.invalid_data("timestamp"))

        try:
            entity = VerificationRequest(
                id=model.id,
                user_id=user_id.value,
                image_id=image_id.value,
                status=status.value,
                reviewed_by=reviewed_by,
                reviewed_at=reviewed_at,
                comment=model.comment,
                created_at=created_at.value,
                updated_at=updated_at.value,
            )
        except DomainException as e:
            self._logger.error(f"Failed to map verification request row {model.id}: {e}")
            return Err(RepositoryError.mapping_error(e))
        return Ok(entity)

    def _database_error(self, operation: str, cause: SQLAlchemyError) -> RepositoryError:
        self._session.rollback()
        self._logger.error(f"Verification request repository {operation} failed: {cause}")
        return RepositoryError.database_error(cause)
