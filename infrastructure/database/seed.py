"""
演示数据

开发环境启动时写入一个普通用户、一个管理员和一张确认照片，
方便直接通过 API 体验审核流程。已有数据时跳过。
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from common.logging import get_logger

from infrastructure.user.models.user_model import UserModel
from infrastructure.verification.models.verification_image_model import (
    VerificationImageModel,
)

DEMO_USER_EMAIL = "test@example.com"
DEMO_ADMIN_EMAIL = "admin@example.com"
DEMO_IMAGE_URL = "https://example.com/image.jpg"


def seed_demo_data(session: Session, logger: Optional[logging.Logger] = None) -> bool:
    """
    写入演示数据

    Args:
        session: 数据库 Session
        logger: 日志记录器

    Returns:
        是否写入了数据（已有用户时返回 False）
    """
    log = logger or get_logger(__name__)

    if session.query(UserModel).first() is not None:
        log.info("Demo data skipped: users table is not empty")
        return False

    user = UserModel(email=DEMO_USER_EMAIL, name="Test User", role="USER")
    admin = UserModel(email=DEMO_ADMIN_EMAIL, name="Admin User", role="ADMIN")
    session.add_all([user, admin])
    session.flush()

    session.add(VerificationImageModel(user_id=user.id, image_url=DEMO_IMAGE_URL))
    session.commit()

    log.info(f"Demo data created: user_id={user.id}, admin_id={admin.id}")
    return True
