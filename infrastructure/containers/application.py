"""
应用容器（AppContainer）

管理应用层组件：命令/查询处理器。
依赖 InfraContainer 获取仓储。

Handler 注册流程：
1. 在此容器中定义 Handler 的 Provider
2. 在 wire_routes() 中把 Provider 设置为路由模块的 handler getter
3. 路由通过 Depends 获取 Handler 实例（依赖已注入）
"""

from dependency_injector import containers, providers

from application.commands.verification import (
    CreateVerificationRequestHandler,
    ReviewVerificationRequestHandler,
    SubmitVerificationImageHandler,
)
from application.handlers.verification import (
    GetVerificationImageHandler,
    ListVerificationImagesHandler,
    ListVerificationRequestsHandler,
)


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 命令处理器 ============

    create_verification_request_handler = providers.Factory(
        CreateVerificationRequestHandler,
        user_repo=infra.user_repository,
        image_repo=infra.verification_image_repository,
        request_repo=infra.verification_request_repository,
    )

    review_verification_request_handler = providers.Factory(
        ReviewVerificationRequestHandler,
        user_repo=infra.user_repository,
        request_repo=infra.verification_request_repository,
    )

    submit_verification_image_handler = providers.Factory(
        SubmitVerificationImageHandler,
        user_repo=infra.user_repository,
        image_repo=infra.verification_image_repository,
        request_repo=infra.verification_request_repository,
    )

    # ============ 查询处理器 ============

    list_verification_requests_handler = providers.Factory(
        ListVerificationRequestsHandler,
        user_repo=infra.user_repository,
        image_repo=infra.verification_image_repository,
        request_repo=infra.verification_request_repository,
    )

    list_verification_images_handler = providers.Factory(
        ListVerificationImagesHandler,
        user_repo=infra.user_repository,
        image_repo=infra.verification_image_repository,
    )

    get_verification_image_handler = providers.Factory(
        GetVerificationImageHandler,
        image_repo=infra.verification_image_repository,
    )


def wire_routes(container: AppContainer) -> None:
    """
    将 Handler Provider 设置为路由模块的 handler getter

    在应用启动时调用此函数，将容器中的 Handler 与路由连接。

    添加新 Handler 的步骤：
        1. 在 AppContainer 中添加 Handler Provider
        2. 在此函数中调用对应路由模块的 set_*_handler_getter
    """
    from interfaces.api.routes.images import (
        set_get_image_handler_getter,
        set_list_images_handler_getter,
    )
    from interfaces.api.routes.verification import (
        set_create_request_handler_getter,
        set_list_requests_handler_getter,
        set_review_request_handler_getter,
        set_submit_image_handler_getter,
    )

    set_create_request_handler_getter(container.create_verification_request_handler)
    set_review_request_handler_getter(container.review_verification_request_handler)
    set_list_requests_handler_getter(container.list_verification_requests_handler)
    set_submit_image_handler_getter(container.submit_verification_image_handler)
    set_list_images_handler_getter(container.list_verification_images_handler)
    set_get_image_handler_getter(container.get_verification_image_handler)
