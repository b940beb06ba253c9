"""确认状态值对象"""

from enum import Enum
from typing import Any

from domain.common.exceptions import InvalidValueObjectException
from domain.common.result import Err, Ok, Result


class VerificationStatus(str, Enum):
    """本人确认请求状态

    Attributes:
        PENDING: 待审核 - 请求已提交，等待管理员处理
        APPROVED: 已批准
        REJECTED: 已驳回 - 必须附带驳回理由
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def create(cls, value: Any) -> Result["VerificationStatus", InvalidValueObjectException]:
        """校验工厂，未知状态返回 Err"""
        try:
            return Ok(cls(value))
        except ValueError:
            return Err(
                InvalidValueObjectException(
                    value_object_type="VerificationStatus",
                    value=value,
                    reason="無効な確認ステータスです",
                )
            )

    def __str__(self) -> str:
        return self.value
