"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: log.py
@DateTime: 2026-10-17
@Docs: Structured loggers routed through the standard logging tree.
经由标准 logging 树输出的结构化日志器。

The library never configures handlers. Loggers wrap `logging.getLogger` so
that levels and handlers stay under the host application's control, and
events pick up the host's structlog processors when it configures any.
本库不配置任何 handler；日志器包装 `logging.getLogger`，级别与输出由宿主应用控制，
宿主配置了 structlog 处理器时事件会经过这些处理器。
"""

import logging

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module.
    获取模块的结构化日志器。

    Args:
        name: Logger name (typically `__name__`).
            日志器名称（通常为 `__name__`）。
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
