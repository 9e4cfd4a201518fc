"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: message.py
@DateTime: 2026-10-17
@Docs: Message template and interpolation engine.
消息模板与插值引擎。

Templates use positional placeholders `{0}`, `{1}` ... and `{{` / `}}` for
literal braces. Any mismatch between a template and its arguments is a
defect and raises `MessageFormatError` instead of producing misleading text.
模板使用位置占位符 `{0}`、`{1}`……，`{{` / `}}` 表示字面花括号。
模板与参数不一致属于缺陷，会抛出 `MessageFormatError`，而不是输出误导性文本。

Examples:
    >>> from adequate.message import Message
    >>> Message("Must contain {0}", ["lorem"]).render()
    'Must contain lorem'
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from adequate.exceptions import MessageFormatError

type Token = str | int


def parse_template(text: str) -> list[Token]:
    """Split a template into literal chunks and placeholder indices.
    将模板拆分为字面文本片段与占位符索引。

    Args:
        text: Template text.
            模板文本。

    Returns:
        list[Token]: Literal strings and int indices in order of appearance.
            按出现顺序排列的字面字符串与整数索引。

    Raises:
        MessageFormatError: Malformed placeholder or unbalanced brace.
            占位符格式错误或花括号不匹配。
    """
    tokens: list[Token] = []
    buf: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c == "{":
            if i + 1 < n and text[i + 1] == "{":
                buf.append("{")
                i += 2
                continue
            end = text.find("}", i + 1)
            if end == -1:
                raise MessageFormatError(
                    message=f"Unclosed placeholder in template: {text!r}",
                    details={"template": text, "position": i},
                )
            body = text[i + 1 : end]
            # ASCII digits only: str.isdigit() also accepts superscripts
            if not body or not body.isascii() or not body.isdigit():
                raise MessageFormatError(
                    message=f"Placeholder {{{body}}} is not a non-negative integer: {text!r}",
                    details={"template": text, "placeholder": body},
                )
            if buf:
                tokens.append("".join(buf))
                buf = []
            tokens.append(int(body))
            i = end + 1
        elif c == "}":
            if i + 1 < n and text[i + 1] == "}":
                buf.append("}")
                i += 2
                continue
            raise MessageFormatError(
                message=f"Single '}}' in template: {text!r}",
                details={"template": text, "position": i},
            )
        else:
            buf.append(c)
            i += 1
    if buf:
        tokens.append("".join(buf))
    return tokens


@dataclass(frozen=True, slots=True)
class Message:
    """A failure description: template text plus ordered arguments.
    失败描述：模板文本与有序参数。

    Equality and hashing are structural over (text, args) and never render.
    相等性与哈希只基于 (text, args)，不会触发渲染。

    Attributes:
        text: Template text.
            模板文本。
        args: Ordered arguments, normalised to a tuple of str.
            有序参数（规范化为字符串元组）。
    """

    text: str
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Message text must be str, got {type(self.text).__name__}")
        if isinstance(self.args, str):
            raise TypeError("Message args must be a sequence of values, not a single str")
        object.__setattr__(self, "args", tuple(str(a) for a in self.args))

    @classmethod
    def of(cls, text: str, *args: Any) -> "Message":
        """Build a Message from positional arguments.
        以位置参数构建 Message。

        Examples:
            >>> Message.of("Must not contain more characters than {0}", 9).args
            ('9',)
        """
        return cls(text, args)

    def placeholders(self) -> tuple[int, ...]:
        """Return placeholder indices in order of appearance.
        按出现顺序返回占位符索引。
        """
        return tuple(t for t in parse_template(self.text) if isinstance(t, int))

    def render(self) -> str:
        """Interpolate the arguments into the template.
        将参数插入模板。

        Returns:
            str: Rendered text.
                渲染后的文本。

        Raises:
            MessageFormatError: When the template and the arguments disagree.
                模板与参数不一致时抛出。
        """
        out: list[str] = []
        used: set[int] = set()
        for token in parse_template(self.text):
            if isinstance(token, str):
                out.append(token)
                continue
            if token >= len(self.args):
                raise MessageFormatError(
                    message=f"Placeholder {{{token}}} has no argument ({len(self.args)} given): {self.text!r}",
                    details={"template": self.text, "args": list(self.args), "index": token},
                )
            used.add(token)
            out.append(self.args[token])

        unused = [i for i in range(len(self.args)) if i not in used]
        if unused:
            raise MessageFormatError(
                message=f"Arguments {unused} are not referenced by template: {self.text!r}",
                details={"template": self.text, "args": list(self.args), "unused": unused},
            )
        rendered = "".join(out)
        if self.args and rendered == self.text:
            raise MessageFormatError(
                message=f"Rendering did not change template: {self.text!r}",
                details={"template": self.text, "args": list(self.args)},
            )
        return rendered

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict.
        返回便于 JSON 序列化的字典。
        """
        return {"text": self.text, "args": list(self.args)}

    def __str__(self) -> str:
        return self.render()


def messages_of(items: Iterable[Message]) -> tuple[Message, ...]:
    """Normalise an iterable of messages into a tuple, checking types.
    将消息可迭代对象规范化为元组并校验类型。
    """
    out = tuple(items)
    for m in out:
        if not isinstance(m, Message):
            raise TypeError(f"Expected Message, got {type(m).__name__}")
    return out
