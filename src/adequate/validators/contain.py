"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: contain.py
@DateTime: 2026-10-17
@Docs: Substring validators.
子串校验器。

`*_if_given` variants take an optional part and pass when it is None or
empty; `*_if_present` variants take an optional value and pass when it is
None.
`*_if_given` 变体接收可选子串，为 None 或空时通过；`*_if_present` 变体接收可选值，为 None 时通过。
"""

from adequate.catalog import DEFAULT_CATALOG, MessageCatalog
from adequate.message import Message
from adequate.validators.base import OptionalValidator, Validator, fail_if, if_present


def contains(part: str, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """Fail when the value does not contain `part`.
    值不包含 `part` 时失败。

    Examples:
        >>> contains("dolor sit amet")("lorem ipsum").render()
        'Must contain dolor sit amet'
    """

    def check(value: str, /) -> Message | None:
        return fail_if(part not in value, "contains", part, catalog=catalog)

    return check


def not_contain(part: str, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """Fail when the value contains `part`.
    值包含 `part` 时失败。
    """

    def check(value: str, /) -> Message | None:
        return fail_if(part in value, "not_contain", part, catalog=catalog)

    return check


def contains_if_given(part: str | None, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """`contains` that is skipped when `part` is None or empty.
    `part` 为 None 或空时跳过的 `contains`。
    """
    p = part or ""

    def check(value: str, /) -> Message | None:
        return fail_if(bool(p) and p not in value, "contains", p, catalog=catalog)

    return check


def not_contain_if_given(part: str | None, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """`not_contain` that is skipped when `part` is None or empty.
    `part` 为 None 或空时跳过的 `not_contain`。
    """
    p = part or ""

    def check(value: str, /) -> Message | None:
        return fail_if(bool(p) and p in value, "not_contain", p, catalog=catalog)

    return check


def contains_if_present(part: str, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> OptionalValidator[str]:
    return if_present(contains(part, catalog=catalog))


def not_contain_if_present(part: str, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> OptionalValidator[str]:
    return if_present(not_contain(part, catalog=catalog))
