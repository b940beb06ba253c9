"""用户 SQLAlchemy 仓储实现"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.common.exceptions import DomainException
from domain.common.repository_error import RepositoryError
from domain.common.result import Err, Ok, Result
from domain.common.value_objects.date_time import DateTime
from domain.common.value_objects.numeric_id import NumericId
from domain.user.entities.user import User
from domain.user.repositories.user_repository import UserRepository
from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId
from domain.user.value_objects.user_role import UserRole
from infrastructure.user.models.user_model import UserModel


class SqlAlchemyUserRepository(UserRepository):
    """
    用户 SQLAlchemy 仓储实现

    字符串形式的 UserId 通过 NumericId 投影为整数主键。
    """

    def __init__(self, session: Session, logger: Optional[logging.Logger] = None):
        """
        初始化仓储

        Args:
            session: SQLAlchemy Session
            logger: 日志记录器
        """
        self._session = session
        self._logger = logger or logging.getLogger(__name__)

    def find_by_id(self, user_id: UserId) -> Result[Optional[User], RepositoryError]:
        """根据 ID 获取用户"""
        numeric_id = NumericId.create(user_id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        try:
            model = (
                self._session.query(UserModel)
                .filter(UserModel.id == numeric_id.value.value)
                .first()
            )
            if model is None:
                return Ok(None)
            return self._to_entity(model)
        except SQLAlchemyError as e:
            return Err(self._database_error("find_by_id", e))
        finally:
            self._session.close()

    def find_by_email(self, email: Email) -> Result[Optional[User], RepositoryError]:
        """根据邮箱获取用户"""
        try:
            model = (
                self._session.query(UserModel)
                .filter(UserModel.email == email.value)
                .first()
            )
            if model is None:
                return Ok(None)
            return self._to_entity(model)
        except SQLAlchemyError as e:
            return Err(self._database_error("find_by_email", e))
        finally:
            self._session.close()

    def find_all(self) -> Result[List[User], RepositoryError]:
        """获取所有用户"""
        try:
            models = self._session.query(UserModel).order_by(UserModel.id.asc()).all()
            return self._to_entities(models)
        except SQLAlchemyError as e:
            return Err(self._database_error("find_all", e))
        finally:
            self._session.close()

    def save(self, user: User) -> Result[User, RepositoryError]:
        """保存用户（ID 为 0 时新增）"""
        numeric_id = NumericId.create(user.id)
        if not numeric_id.ok:
            return Err(RepositoryError.invalid_id_format())

        try:
            model = None
            if not numeric_id.value.is_unassigned:
                model = (
                    self._session.query(UserModel)
                    .filter(UserModel.id == numeric_id.value.value)
                    .first()
                )

            if model is None:
                model = self._to_model(user)
                if not numeric_id.value.is_unassigned:
                    model.id = numeric_id.value.value
                self._session.add(model)
            else:
                self._update_model(model, user)

            self._session.commit()
            return self._to_entity(model)
        except IntegrityError as e:
            self._session.rollback()
            if "email" in str(e.orig).lower():
                self._logger.warning(f"Duplicate email on save: {user.email}")
                return Err(RepositoryError.duplicate_email())
            return Err(self._database_error("save", e, rolled_back=True))
        except SQLAlchemyError as e:
            self._session.rollback()
            return Err(self._database_error("save", e, rolled_back=True))
        finally:
            # 每次操作结束即归还连接，Session 由容器按处理器创建
            self._session.close()

    def _to_model(self, entity: User) -> UserModel:
        """将领域实体转换为数据模型"""
        return UserModel(
            email=entity.email.value,
            name=entity.name,
            role=entity.role.value,
            created_at=entity.created_at.value,
            updated_at=entity.updated_at.value,
        )

    def _update_model(self, model: UserModel, entity: User) -> None:
        """更新数据模型"""
        model.email = entity.email.value
        model.name = entity.name
        model.role = entity.role.value
        model.updated_at = entity.updated_at.value

    def _to_entity(self, model: UserModel) -> Result[User, RepositoryError]:
        """将数据模型转换为领域实体"""
        user_id = UserId.create(model.id)
        if not user_id.ok:
            return Err(RepositoryError.invalid_data("id"))
        email = Email.create(model.email)
        if not email.ok:
            return Err(RepositoryError.invalid_data("email"))
        role = UserRole.create(model.role)
        if not role.ok:
            return Err(RepositoryError.invalid_data("role"))
        created_at = DateTime.create(model.created_at)
        updated_at = DateTime.create(model.updated_at)
        if not created_at.ok or not updated_at.ok:
            return Err(RepositoryError.invalid_data("timestamp"))

        user = User.create(
            id=user_id.value,
            email=email.value,
            name=model.name,
            role=role.value,
            created_at=created_at.value,
            updated_at=updated_at.value,
        )
        if not user.ok:
            return Err(self._mapping_error(model, user.error))
        return user

    def _to_entities(self, models: List[UserModel]) -> Result[List[User], RepositoryError]:
        users: List[User] = []
        for model in models:
            result = self._to_entity(model)
            if not result.ok:
                return result
            users.append(result.value)
        return Ok(users)

    def _mapping_error(self, model: UserModel, cause: DomainException) -> RepositoryError:
        self._logger.error(f"Failed to map user row {model.id}: {cause}")
        return RepositoryError.mapping_error(cause)

    def _database_error(
        self, operation: str, cause: SQLAlchemyError, rolled_back: bool = False
    ) -> RepositoryError:
        if not rolled_back:
            self._session.rollback()
        self._logger.error(f"User repository {operation} failed: {cause}")
        return RepositoryError.database_error(cause)
