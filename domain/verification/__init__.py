"""Verification 领域模块

本人确认的领域层，包含确认请求状态机、确认照片以及相关的值对象和仓储接口。
"""

from domain.verification.entities.verification_image import VerificationImage
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.repositories.verification_image_repository import (
    VerificationImageRepository,
)
from domain.verification.repositories.verification_request_repository import (
    VerificationRequestRepository,
)
from domain.verification.value_objects import ImageId, VerificationStatus

__all__ = [
    "VerificationImage",
    "VerificationRequest",
    "VerificationImageRepository",
    "VerificationRequestRepository",
    "ImageId",
    "VerificationStatus",
]
