"""
日志模块

loaderfetch 作为库被导入时日志默认是静默的（包的 __init__ 中调用
logger.disable）。需要查看解析、下载过程时调用 setup_logger：
它会重新启用本库的日志，并添加一个只接收本库记录的输出，
不会移除或影响使用方已有的 loguru 输出。
"""

import os
import sys
from typing import Optional

from loguru import logger

PACKAGE = "loaderfetch"

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logger(
    level: Optional[str] = None,
    sink=sys.stdout,
    enqueue: bool = False,
    colorize: bool = True,
) -> int:
    """
    启用 loaderfetch 的日志输出

    Args:
        level: 日志级别，默认由 LOADERFETCH_DEBUG 环境变量决定
        sink: 输出目标
        enqueue: 是否经由队列写入（多进程/线程安全）
        colorize: 是否启用颜色

    Returns:
        新增输出的 handler id，可交给 shutdown_logger 移除
    """
    if level is None:
        level = "DEBUG" if os.environ.get("LOADERFETCH_DEBUG", "0") == "1" else "INFO"

    logger.enable(PACKAGE)
    handler_id = logger.add(
        sink=sink,
        format=LOG_FORMAT,
        filter=PACKAGE,
        level=level,
        enqueue=enqueue,
        colorize=colorize,
        backtrace=(level == "DEBUG"),
        diagnose=(level == "DEBUG"),
    )
    logger.debug(f"[日志] 已启用，级别 {level}")
    return handler_id


def shutdown_logger(handler_id: Optional[int] = None) -> None:
    """移除 setup_logger 添加的输出，并让本库重新静默"""
    if handler_id is not None:
        logger.remove(handler_id)
    logger.disable(PACKAGE)


__all__ = ["setup_logger", "shutdown_logger"]
