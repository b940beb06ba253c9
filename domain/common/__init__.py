"""领域通用模块

基类、异常、Result 类型与仓储错误。
"""

from domain.common.base_entity import BaseEntity, TimestampedEntity
from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import (
    DomainException,
    InvalidOperationException,
    InvalidStateTransitionException,
    InvalidValueObjectException,
)
from domain.common.repository_error import RepositoryError, RepositoryErrorType
from domain.common.result import Err, Ok, Result

__all__ = [
    "BaseEntity",
    "BaseValueObject",
    "TimestampedEntity",
    "DomainException",
    "InvalidOperationException",
    "InvalidStateTransitionException",
    "InvalidValueObjectException",
    "RepositoryError",
    "RepositoryErrorType",
    "Err",
    "Ok",
    "Result",
]
