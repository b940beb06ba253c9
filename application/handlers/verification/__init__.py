"""Verification handlers package"""

from application.handlers.verification.get_verification_image_handler import (
    GetVerificationImageHandler,
    GetVerificationImageResult,
)
from application.handlers.verification.list_verification_images_handler import (
    ListVerificationImagesHandler,
    ListVerificationImagesResult,
)
from application.handlers.verification.list_verification_requests_handler import (
    ListVerificationRequestsHandler,
    ListVerificationRequestsResult,
    VerificationRequestItem,
)

__all__ = [
    "GetVerificationImageHandler",
    "GetVerificationImageResult",
    "ListVerificationImagesHandler",
    "ListVerificationImagesResult",
    "ListVerificationRequestsHandler",
    "ListVerificationRequestsResult",
    "VerificationRequestItem",
]
