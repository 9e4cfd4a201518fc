"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: error.py
@DateTime: 2026-10-17
@Docs: Aggregated validation outcome for a whole record.
整条记录的聚合校验结果。

Equality is positional. Errors holding a different number of feedbacks are
simply unequal.
相等性按位置比较；反馈数量不同的 Error 视为不相等。
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from adequate.feedback import Feedback


@dataclass(frozen=True, slots=True, eq=False)
class Error:
    """Ordered negative feedbacks of one validation run.
    一次校验运行中按顺序排列的失败反馈。

    Attributes:
        feedbacks: Negative feedbacks in field declaration order.
            按字段声明顺序排列的失败反馈。
    """

    feedbacks: tuple[Feedback, ...]

    def __post_init__(self) -> None:
        items = tuple(self.feedbacks)
        if not items:
            raise ValueError("Error needs at least one negative feedback")
        for f in items:
            if not isinstance(f, Feedback):
                raise TypeError(f"Expected Feedback, got {type(f).__name__}")
            if not f.is_negative():
                raise ValueError(f"Error can only hold negative feedback, field {f.field!r} has no messages")
        object.__setattr__(self, "feedbacks", items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        if len(self.feedbacks) != len(other.feedbacks):
            return False
        return all(a == b for a, b in zip(self.feedbacks, other.feedbacks, strict=True))

    def __hash__(self) -> int:
        return hash(self.feedbacks)

    def __len__(self) -> int:
        return len(self.feedbacks)

    def __iter__(self) -> Iterator[Feedback]:
        return iter(self.feedbacks)

    def __getitem__(self, index: int) -> Feedback:
        return self.feedbacks[index]

    def fields(self) -> tuple[str, ...]:
        """Return failing field names in order.
        按顺序返回失败的字段名。
        """
        return tuple(f.field for f in self.feedbacks)

    def get(self, field: str) -> Feedback | None:
        """Return the first feedback for a field, or None.
        返回字段的第一条反馈；不存在时返回 None。
        """
        for f in self.feedbacks:
            if f.field == field:
                return f
        return None

    def render(self) -> dict[str, list[str]]:
        """Render as an ordered mapping of field -> messages.
        渲染为有序的 字段 -> 消息 映射。

        Repeated field names have their messages merged in order.
        重复的字段名会按顺序合并消息。
        """
        out: dict[str, list[str]] = {}
        for f in self.feedbacks:
            out.setdefault(f.field, []).extend(f.render())
        return out

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [f.to_dict() for f in self.feedbacks]}

    def __str__(self) -> str:
        return "\n".join(str(f) for f in self.feedbacks)
