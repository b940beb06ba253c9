"""Verification 命令模块"""

from application.commands.verification.create_verification_request import (
    CreateVerificationRequestCommand,
    CreateVerificationRequestResult,
    CreateVerificationRequestHandler,
)
from application.commands.verification.review_verification_request import (
    ReviewVerificationRequestCommand,
    ReviewVerificationRequestResult,
    ReviewVerificationRequestHandler,
)
from application.commands.verification.submit_verification_image import (
    SubmitVerificationImageCommand,
    SubmitVerificationImageResult,
    SubmitVerificationImageHandler,
    normalize_image_data,
)

__all__ = [
    "CreateVerificationRequestCommand",
    "CreateVerificationRequestResult",
    "CreateVerificationRequestHandler",
    "ReviewVerificationRequestCommand",
    "ReviewVerificationRequestResult",
    "ReviewVerificationRequestHandler",
    "SubmitVerificationImageCommand",
    "SubmitVerificationImageResult",
    "SubmitVerificationImageHandler",
    "normalize_image_data",
]
