"""
API 接口层

提供 FastAPI 应用封装和 REST 路由。

用法：
    from interfaces.api import create_app

    app = create_app()
"""

from interfaces.api.app import DDDApp, create_app

__all__ = [
    "DDDApp",
    "create_app",
]
