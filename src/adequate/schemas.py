"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-17
@Docs: Presentation schemas for validation errors.
校验错误的展示模型。

Building a schema renders the messages, so it only happens at presentation
time. Template drift raises `MessageFormatError` here.
构建模型时会渲染消息，因此仅在展示阶段执行；模板不一致会在此抛出 `MessageFormatError`。
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from adequate.error import Error
from adequate.feedback import Feedback
from adequate.helpers.rows import RowError
from adequate.message import Message


class MessageItem(BaseModel):
    """Rendered message.
    渲染后的消息。
    """

    text: str
    template: str
    args: list[str] = Field(default_factory=list)

    @classmethod
    def from_message(cls, message: Message) -> "MessageItem":
        return cls(text=message.render(), template=message.text, args=list(message.args))


class FeedbackItem(BaseModel):
    """Messages of one field.
    单个字段的消息。
    """

    field: str
    messages: list[MessageItem] = Field(default_factory=list)

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "FeedbackItem":
        return cls(field=feedback.field, messages=[MessageItem.from_message(m) for m in feedback.messages])


class ErrorResponse(BaseModel):
    """Validation error response body.
    校验错误响应体。
    """

    detail: str = "Validation failed"
    errors: list[FeedbackItem] = Field(default_factory=list)


class RowErrorItem(BaseModel):
    """Errors of one row.
    单行的错误。
    """

    row_number: int
    errors: list[FeedbackItem] = Field(default_factory=list)


def error_response(error: Error, *, detail: str = "Validation failed") -> ErrorResponse:
    """Build the response body for an Error.
    为 Error 构建响应体。

    Args:
        error: Aggregated validation error.
            聚合后的校验错误。
        detail: Summary text.
            摘要文本。
    """
    return ErrorResponse(detail=detail, errors=[FeedbackItem.from_feedback(f) for f in error])


def row_error_items(rows: Iterable[RowError]) -> list[RowErrorItem]:
    """Build response items for failing rows.
    为失败行构建响应项。
    """
    return [
        RowErrorItem(row_number=r.row_number, errors=[FeedbackItem.from_feedback(f) for f in r.error])
        for r in rows
    ]
