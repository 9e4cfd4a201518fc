"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: catalog.py
@DateTime: 2026-10-17
@Docs: Read-only message catalog.
只读消息目录。

The catalog maps short validator keys to message templates. It is an
immutable value built once and passed explicitly to validators.
消息目录将校验器短键映射到消息模板；它是启动时构建一次、显式传递给校验器的不可变值。

Key-miss policy: fail loudly. `template()` raises `CatalogKeyError`; there
is no empty-template fallback.
键缺失策略：显式失败。`template()` 抛出 `CatalogKeyError`，不会回退为空模板。

Examples:
    >>> from adequate.catalog import DEFAULT_CATALOG
    >>> DEFAULT_CATALOG.message("max", 9).render()
    'Must not contain more characters than 9'
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from adequate.exceptions import CatalogKeyError
from adequate.log import get_logger
from adequate.message import Message, parse_template

logger = get_logger(__name__)

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "max": "Must not contain more characters than {0}",
        "min": "Must not contain less characters than {0}",
        "within": "Must contain characters within a range of {0}-{1}",
        "contains": "Must contain {0}",
        "not_contain": "Must not contain {0}",
    }
)


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Immutable key -> template mapping.
    不可变的 键 -> 模板 映射。

    Attributes:
        templates: Read-only mapping of keys to templates.
            键到模板的只读映射。
    """

    templates: Mapping[str, str] = field(default_factory=lambda: DEFAULT_MESSAGES)

    def __post_init__(self) -> None:
        items = dict(self.templates)
        for key, text in items.items():
            if not isinstance(key, str) or not isinstance(text, str):
                raise TypeError("Message catalog keys and templates must be str")
            # malformed templates fail here rather than on first render
            parse_template(text)
        object.__setattr__(self, "templates", MappingProxyType(items))

    def __contains__(self, key: object) -> bool:
        return key in self.templates

    def __iter__(self) -> Iterator[str]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    def template(self, key: str) -> str:
        """Return the template for a key.
        返回键对应的模板。

        Raises:
            CatalogKeyError: When the key is unknown.
                键不存在时抛出。
        """
        try:
            return self.templates[key]
        except KeyError:
            logger.warning("catalog.key_missing", key=key, known=sorted(self.templates))
            raise CatalogKeyError(key) from None

    def message(self, key: str, *args: Any) -> Message:
        """Build a Message from a catalog key.
        通过目录键构建 Message。
        """
        return Message(self.template(key), args)

    def arity(self, key: str) -> int:
        """Number of distinct placeholders the template uses.
        模板使用的不同占位符数量。
        """
        return len({t for t in parse_template(self.template(key)) if isinstance(t, int)})

    def merged(self, overrides: Mapping[str, str]) -> "MessageCatalog":
        """Return a new catalog with overrides applied.
        返回应用覆盖项后的新目录。
        """
        return MessageCatalog({**self.templates, **overrides})


DEFAULT_CATALOG = MessageCatalog()
