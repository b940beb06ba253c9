"""仓储错误

仓储接口以 Err(RepositoryError) 表达持久化失败，领域层和应用层原样传递，
不解析其内部原因。
"""

from enum import Enum
from typing import Optional

from domain.common.exceptions import DomainException


class RepositoryErrorType(str, Enum):
    """仓储错误类型（封闭集合）"""

    INVALID_ID_FORMAT = "INVALID_ID_FORMAT"
    DATABASE_ERROR = "DATABASE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_DATA = "INVALID_DATA"
    MAPPING_ERROR = "MAPPING_ERROR"


class RepositoryError(DomainException):
    """仓储错误

    Attributes:
        type: 错误类型
        message: 错误消息
        cause: 底层异常（可选，不对外暴露）
    """

    def __init__(
        self,
        type: RepositoryErrorType,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.type = type
        self.cause = cause

    def __repr__(self) -> str:
        return f"RepositoryError(type={self.type.value}, message={self.message!r})"

    @classmethod
    def invalid_id_format(cls, message: str = "IDの形式が不正です") -> "RepositoryError":
        return cls(RepositoryErrorType.INVALID_ID_FORMAT, message)

    @classmethod
    def database_error(cls, cause: Optional[BaseException] = None) -> "RepositoryError":
        return cls(
            RepositoryErrorType.DATABASE_ERROR,
            "データベース操作中にエラーが発生しました",
            cause,
        )

    @classmethod
    def not_found(cls, message: str = "データが見つかりません") -> "RepositoryError":
        return cls(RepositoryErrorType.NOT_FOUND, message)

    @classmethod
    def duplicate_email(
        cls, message: str = "このメールアドレスは既に使用されています"
    ) -> "RepositoryError":
        return cls(RepositoryErrorType.DUPLICATE_EMAIL, message)

    @classmethod
    def invalid_data(cls, field: str = "") -> "RepositoryError":
        message = f"{field}のデータが不正です" if field else "データが不正です"
        return cls(RepositoryErrorType.INVALID_DATA, message)

    @classmethod
    def mapping_error(cls, cause: Optional[BaseException] = None) -> "RepositoryError":
        return cls(
            RepositoryErrorType.MAPPING_ERROR,
            "データのマッピング中にエラーが発生しました",
            cause,
        )
