"""
日志模块

支持两种后端，由配置项 log_backend 或环境变量 LOG_BACKEND 选择：
- simple: 标准库 logging
- loguru: Loguru（彩色输出、文件轮转），标准库日志经 InterceptHandler 转发

用法：
    from common.logging import get_logger

    logger = get_logger(__name__)
    logger.info("User created: user_id=123")

应用入口和启动脚本使用 get_logger()；应用层和基础设施层的类
接收可注入的 logging.Logger（默认 logging.getLogger(__name__)），
启用 loguru 后端时这些记录同样进入 loguru 的 sink。
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger as _loguru_logger

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
_LOGURU_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_backend: Optional[str] = None


class InterceptHandler(logging.Handler):
    """把标准库 logging 记录转发给 loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = _loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 跳过 logging 模块自身的栈帧，定位真实调用方
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _loguru_logger.bind(logger_name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def _setup_simple(level: str, log_file: Optional[str]) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=_DEFAULT_FORMAT, handlers=handlers, force=True)


def _setup_loguru(level: str, log_file: Optional[str]) -> None:
    _loguru_logger.remove()
    _loguru_logger.configure(extra={"logger_name": "app"})
    _loguru_logger.add(sys.stderr, level=level, format=_LOGURU_FORMAT)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _loguru_logger.add(
            log_file,
            level=level,
            format=_LOGURU_FORMAT,
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # uvicorn 自带 handler，改为交给根 logger
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True


def setup_logging(
    level: str = "INFO",
    backend: Optional[str] = None,
    log_file: Optional[str] = None,
) -> str:
    """
    初始化日志

    Args:
        level: 日志级别
        backend: simple / loguru，默认读取环境变量 LOG_BACKEND
        log_file: 日志文件路径（可选）

    Returns:
        实际使用的后端名称
    """
    global _backend
    backend = (backend or os.getenv("LOG_BACKEND", "simple")).lower()
    level = level.upper()

    if backend == "loguru":
        _setup_loguru(level, log_file)
    elif backend == "simple":
        _setup_simple(level, log_file)
    else:
        raise ValueError(f"Unsupported log backend: {backend}")

    _backend = backend
    return backend


def get_log_backend() -> str:
    """当前日志后端"""
    return _backend or os.getenv("LOG_BACKEND", "simple").lower()


def get_logger(name: str) -> Any:
    """
    获取 logger

    Args:
        name: logger 名称（通常为 __name__）

    Returns:
        loguru 后端返回绑定了名称的 loguru logger，否则返回标准库 logger
    """
    if get_log_backend() == "loguru":
        return _loguru_logger.bind(logger_name=name)
    return logging.getLogger(name)


__all__ = [
    "InterceptHandler",
    "setup_logging",
    "get_log_backend",
    "get_logger",
]
