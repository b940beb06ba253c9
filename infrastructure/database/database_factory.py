"""
数据库工厂

根据运行环境创建 SQLAlchemy 引擎和 Session 工厂。
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    数据库工厂

    - test: 内存 SQLite（StaticPool，所有连接共享同一个库）
    - dev: 本地 SQLite 文件
    - staging / prod: 外部数据库，带连接池参数
    """

    @staticmethod
    def create_engine(
        settings: Optional[Settings] = None,
        database_url: Optional[str] = None,
    ) -> Engine:
        """
        创建数据库引擎

        Args:
            settings: 配置，默认使用全局配置
            database_url: 覆盖配置中的数据库 URL

        Returns:
            SQLAlchemy Engine
        """
        settings = settings or get_settings()
        url = database_url or settings.database_url

        if not url:
            raise ValueError(f"Database URL is not configured for env: {settings.app_env}")

        if url.startswith("sqlite"):
            if ":memory:" in url:
                logger.info("Creating in-memory SQLite engine")
                return create_engine(
                    url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                    echo=settings.debug,
                )

            db_path = url.replace("sqlite:///", "", 1)
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Creating SQLite engine: {db_path}")
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                echo=settings.debug,
            )

        logger.info(f"Creating database engine for env: {settings.app_env}")
        return create_engine(
            url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
            echo=settings.debug,
        )

    @staticmethod
    def create_session_factory(engine: Engine) -> sessionmaker:
        """创建 Session 工厂"""
        return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    @staticmethod
    def create_tables(engine: Engine) -> None:
        """创建所有表（导入模型以注册到 metadata）"""
        from infrastructure.database.base import Base
        import infrastructure.user.models.user_model  # noqa: F401
        import infrastructure.verification.models.verification_image_model  # noqa: F401
        import infrastructure.verification.models.verification_request_model  # noqa: F401

        Base.metadata.create_all(engine)
