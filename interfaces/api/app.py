"""
DDDApp - FastAPI 应用封装

负责：
- 初始化日志
- 创建并连接 DI 容器
- 生命周期管理（启动建表、可选写入演示数据、关闭时释放引擎）
- 统一的 500 异常处理（不暴露内部错误）
"""

from contextlib import asynccontextmanager
from typing import Any, Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging import get_logger, setup_logging
from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap, wire_routes
from infrastructure.database.database_factory import DatabaseFactory
from infrastructure.database.seed import seed_demo_data


class DDDApp:
    """
    FastAPI 应用封装

    用法：
        ddd_app = DDDApp(title="Identity Verification Service")
        ddd_app.fastapi.include_router(router, prefix="/api/v1")

        @ddd_app.get("/health")
        async def health():
            return {"status": "healthy"}

        ddd_app.run()
    """

    def __init__(
        self,
        title: str,
        description: str = "",
        version: str = "1.0.0",
        settings: Optional[Settings] = None,
        configure_logging: bool = True,
    ):
        self.settings = settings or get_settings()

        if configure_logging:
            setup_logging(
                level=self.settings.log_level,
                backend=self.settings.log_backend,
                log_file=None if self.settings.is_test else self.settings.log_file,
            )

        self.logger = get_logger(__name__)
        self.bootstrap: Bootstrap = bootstrap(self.settings)
        wire_routes(self.bootstrap.app)

        self.fastapi = FastAPI(
            title=title,
            description=description,
            version=version,
            lifespan=self._lifespan,
        )
        self.fastapi.state.bootstrap = self.bootstrap
        self.fastapi.add_exception_handler(Exception, self._unhandled_exception)

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        engine = self.bootstrap.infra.db_engine()
        DatabaseFactory.create_tables(engine)
        self.logger.info(f"Database ready (env={self.settings.app_env})")

        if self.settings.should_seed_demo_data:
            session = self.bootstrap.infra.db_session()
            try:
                seed_demo_data(session)
            finally:
                session.close()

        yield

        engine.dispose()
        self.logger.info("Database engine disposed")

    async def _unhandled_exception(self, request: Request, exc: Exception) -> JSONResponse:
        self.logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    def get(self, path: str, **kwargs: Any) -> Callable:
        """注册 GET 路由（同 FastAPI.get）"""
        return self.fastapi.get(path, **kwargs)

    def run(self, host: str = "0.0.0.0", port: int = 8000, **kwargs: Any) -> None:
        """使用 uvicorn 启动服务"""
        import uvicorn

        uvicorn.run(self.fastapi, host=host, port=port, **kwargs)


def create_app(
    settings: Optional[Settings] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    创建完整配置的 FastAPI 应用（包含全部路由）

    Args:
        settings: 覆盖全局配置（测试时使用）
        configure_logging: 是否初始化日志

    Returns:
        FastAPI 应用
    """
    from interfaces.api.routes import images_router, verification_router

    settings = settings or get_settings()
    ddd_app = DDDApp(
        title=settings.app_name,
        description="本人确认服务 - 提交确认照片、管理员审核（批准/驳回）",
        version=settings.app_version,
        settings=settings,
        configure_logging=configure_logging,
    )

    ddd_app.fastapi.include_router(verification_router, prefix="/api/v1", tags=["本人确认请求"])
    ddd_app.fastapi.include_router(images_router, prefix="/api/v1", tags=["确认照片"])

    @ddd_app.get("/")
    async def root():
        """服务信息"""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "description": "本人确认服务",
            "docs": "/docs",
            "endpoints": {
                "requests": "/api/v1/verification/requests",
                "review": "/api/v1/verification/requests/{id}",
                "submit_image": "/api/v1/verification/images",
                "images": "/api/v1/images",
            },
        }

    @ddd_app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "healthy"}

    return ddd_app.fastapi
