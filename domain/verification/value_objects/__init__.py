"""Verification 领域值对象模块"""

from domain.verification.value_objects.image_id import ImageId
from domain.verification.value_objects.verification_status import VerificationStatus

__all__ = ["ImageId", "VerificationStatus"]
