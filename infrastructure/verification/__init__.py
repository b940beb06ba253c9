"""Verification 基础设施模块

提供确认照片和本人确认请求的持久化实现。
"""

from infrastructure.verification.models.verification_image_model import (
    VerificationImageModel,
)
from infrastructure.verification.models.verification_request_model import (
    VerificationRequestModel,
)
from infrastructure.verification.repositories.sqlalchemy_verification_image_repository import (
    SqlAlchemyVerificationImageRepository,
)
from infrastructure.verification.repositories.sqlalchemy_verification_request_repository import (
    SqlAlchemyVerificationRequestRepository,
)

__all__ = [
    "VerificationImageModel",
    "VerificationRequestModel",
    "SqlAlchemyVerificationImageRepository",
    "SqlAlchemyVerificationRequestRepository",
]
