"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-17
@Docs: Validation error hierarchy.
校验异常体系。

Expected validation failures are data (Message/Feedback/Error) and are never
raised. Exceptions here are either defects (template drift, catalog miss) or
the explicit opt-in `ValidationFailed`.
预期内的校验失败以数据表示，不会抛出；此处的异常仅用于缺陷或显式的 ValidationFailed。
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from adequate.error import Error


class AdequateError(Exception):
    """
    Base error.
    基础异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "adequate_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class MessageFormatError(AdequateError):
    """
    Template and arguments do not match.
    模板与参数不匹配。

    Raised while rendering; signals that validator code and the message
    catalog drifted apart.
    渲染时抛出，表示校验器代码与消息目录不同步。
    """

    def __init__(self, *, message: str, details: Any | None = None) -> None:
        super().__init__(message=message, status_code=500, details=details, error_code="message_format")


class CatalogKeyError(AdequateError):
    """
    Unknown message catalog key.
    消息目录中不存在的键。
    """

    def __init__(self, key: str) -> None:
        super().__init__(
            message=f"Unknown message key: {key!r}",
            status_code=500,
            details={"key": key},
            error_code="catalog_key_missing",
        )
        self.key = key


class ValidationFailed(AdequateError):
    """
    Validation run failed.
    校验未通过。

    Only raised by `ValidationResult.raise_for_error()`.
    仅由 `ValidationResult.raise_for_error()` 抛出。

    Attributes:
        error: The aggregated Error.
        error: 聚合后的 Error。
    """

    def __init__(self, error: "Error", *, status_code: int = 422) -> None:
        super().__init__(
            message="Validation failed",
            status_code=status_code,
            details=error.render(),
            error_code="validation_failed",
        )
        self.error = error
