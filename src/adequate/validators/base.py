"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-10-17
@Docs: Validator protocols and shared helpers.
校验器协议与公共辅助函数。
"""

from typing import Any, Protocol, TypeVar

from adequate.catalog import DEFAULT_CATALOG, MessageCatalog
from adequate.message import Message

T_contra = TypeVar("T_contra", contravariant=True)


class Validator(Protocol[T_contra]):
    """Validator protocol.
    校验器协议。

    A pure callable: returns None on success, a Message on failure.
    纯函数：成功返回 None，失败返回 Message。
    """

    def __call__(self, value: T_contra, /) -> Message | None: ...


class OptionalValidator(Protocol[T_contra]):
    """Validator over an absent-or-present value; None input always succeeds.
    针对可缺省值的校验器；输入为 None 时总是通过。
    """

    def __call__(self, value: T_contra | None, /) -> Message | None: ...


def fail_if(condition: bool, key: str, *args: Any, catalog: MessageCatalog = DEFAULT_CATALOG) -> Message | None:
    """Return a catalog Message when `condition` holds, else None.
    当 `condition` 成立时返回目录消息，否则返回 None。

    Args:
        condition: Whether the check failed.
            校验是否失败。
        key: Catalog key.
            目录键。
        *args: Template arguments.
            模板参数。
        catalog: Message catalog.
            消息目录。
    """
    if condition:
        return catalog.message(key, *args)
    return None


def if_present[T](validator: Validator[T]) -> OptionalValidator[T]:
    """Lift a validator so that an absent (None) value succeeds.
    包装校验器，使缺省值（None）直接通过。
    """

    def check(value: T | None, /) -> Message | None:
        if value is None:
            return None
        return validator(value)

    return check
