"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.images import router as images_router
from interfaces.api.routes.verification import router as verification_router

__all__ = ["images_router", "verification_router"]
