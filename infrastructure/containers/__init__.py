"""
DI 容器

三层容器：
- ConfigContainer: 配置
- InfraContainer: 数据库和仓储
- AppContainer: 命令/查询处理器

用法：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    handler = boot.app.create_verification_request_handler()
"""

from dataclasses import dataclass
from typing import Optional

from infrastructure.config.settings import Settings
from .application import AppContainer, wire_routes
from .config import ConfigContainer
from .infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已连接好的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    创建并连接容器

    Args:
        settings: 覆盖全局配置（测试时使用）

    Returns:
        Bootstrap
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(settings)

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


__all__ = [
    "AppContainer",
    "Bootstrap",
    "ConfigContainer",
    "InfraContainer",
    "bootstrap",
    "wire_routes",
]
