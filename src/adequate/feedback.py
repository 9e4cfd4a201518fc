"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: feedback.py
@DateTime: 2026-10-17
@Docs: Per-field validation outcome.
单字段校验结果。
"""

from dataclasses import dataclass
from typing import Any

from adequate.message import Message, messages_of


@dataclass(frozen=True, slots=True)
class Feedback:
    """Field name plus the messages produced by that field's validators.
    字段名以及该字段校验器产生的消息。

    Attributes:
        field: Field name.
            字段名。
        messages: Failure messages in validator order.
            按校验器顺序排列的失败消息。
    """

    field: str
    messages: tuple[Message, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", messages_of(self.messages))

    def is_negative(self) -> bool:
        """Return True when at least one validator failed.
        至少一个校验器失败时返回 True。
        """
        return len(self.messages) > 0

    def render(self) -> list[str]:
        """Render every message in order.
        按顺序渲染所有消息。
        """
        return [m.render() for m in self.messages]

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "messages": self.render()}

    def __str__(self) -> str:
        return f"{self.field}: {'; '.join(self.render())}"
