"""领域异常定义

领域层的预期失败通过 Result 返回，异常实例作为 Err 的错误载荷；
直接构造非法值对象或实体时同样抛出这些异常。
"""

from typing import Any, Optional


class DomainException(Exception):
    """领域异常基类

    Attributes:
        message: 面向调用方的错误消息
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidValueObjectException(DomainException):
    """值对象校验失败

    Attributes:
        value_object_type: 值对象类型名称
        value: 原始输入值
        reason: 失败原因（即 message）
    """

    def __init__(self, value_object_type: str, value: Any, reason: str):
        super().__init__(reason)
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason


class InvalidStateTransitionException(DomainException):
    """非法状态转换

    Attributes:
        entity: 实体名称
        from_state: 当前状态
        to_state: 目标状态
        reason: 失败原因（即 message）
    """

    def __init__(self, entity: str, from_state: str, to_state: str, reason: str):
        super().__init__(reason)
        self.entity = entity
        self.from_state = from_state
        self.to_state = to_state
        self.reason = reason


class InvalidOperationException(DomainException):
    """实体操作失败（实体级校验不通过）

    Attributes:
        operation: 操作名称
        reason: 失败原因（即 message）
    """

    def __init__(self, operation: str, reason: str, cause: Optional[Exception] = None):
        super().__init__(reason)
        self.operation = operation
        self.reason = reason
        self.cause = cause
