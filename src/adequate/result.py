"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: result.py
@DateTime: 2026-10-17
@Docs: Outcome of a validation run.
校验运行结果。
"""

from dataclasses import dataclass

from adequate.error import Error
from adequate.exceptions import ValidationFailed


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Success, or an Error carrying every failing field.
    成功，或携带所有失败字段的 Error。

    The result is falsy when validation failed::

        result = validate(("name", name, [max_length(64)]))
        if not result:
            return result.error.render()

    Attributes:
        error: The aggregated Error, None on success.
            聚合后的 Error，成功时为 None。
    """

    error: Error | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(None)

    @classmethod
    def err(cls, error: Error) -> "ValidationResult":
        return cls(error)

    @property
    def is_ok(self) -> bool:
        """True when every validator of every field passed.
        所有字段的所有校验器均通过时为 True。
        """
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def __bool__(self) -> bool:
        return self.is_ok

    def raise_for_error(self, *, status_code: int = 422) -> None:
        """Raise ValidationFailed when the run failed.
        校验失败时抛出 ValidationFailed。

        Args:
            status_code: HTTP status code carried by the exception.
                异常携带的 HTTP 状态码。

        Raises:
            ValidationFailed: When `error` is set.
                当 `error` 存在时抛出。
        """
        if self.error is not None:
            raise ValidationFailed(self.error, status_code=status_code)
