"""
基础设施容器（InfraContainer）

管理所有基础设施组件：数据库引擎、Session、仓储实现等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from infrastructure.database.database_factory import DatabaseFactory
from infrastructure.user.repositories.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from infrastructure.verification.repositories.sqlalchemy_verification_image_repository import (
    SqlAlchemyVerificationImageRepository,
)
from infrastructure.verification.repositories.sqlalchemy_verification_request_repository import (
    SqlAlchemyVerificationRequestRepository,
)


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 数据库 ============

    # 数据库引擎（单例）
    db_engine: providers.Singleton[Engine] = providers.Singleton(
        DatabaseFactory.create_engine,
        settings=config.settings,
    )

    # Session 工厂（单例）
    db_session_factory: providers.Singleton[sessionmaker] = providers.Singleton(
        DatabaseFactory.create_session_factory,
        engine=db_engine
    )

    # 数据库 Session（每次请求新实例）
    db_session = providers.Factory(
        lambda session_factory: session_factory(),
        session_factory=db_session_factory
    )

    # ============ 仓储 ============

    # 用户仓储
    user_repository = providers.Factory(
        SqlAlchemyUserRepository,
        session=db_session
    )

    # 确认照片仓储
    verification_image_repository = providers.Factory(
        SqlAlchemyVerificationImageRepository,
        session=db_session
    )

    # 确认请求仓储
    verification_request_repository = providers.Factory(
        SqlAlchemyVerificationRequestRepository,
        session=db_session
    )
