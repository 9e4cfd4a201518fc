"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: length.py
@DateTime: 2026-10-17
@Docs: String length validators.
字符串长度校验器。

Length is counted in characters (`len(str)`).
长度按字符数（`len(str)`）计算。
"""

from adequate.catalog import DEFAULT_CATALOG, MessageCatalog
from adequate.message import Message
from adequate.validators.base import OptionalValidator, Validator, fail_if, if_present


def max_length(size: int, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """Fail when the value has more than `size` characters.
    值的字符数超过 `size` 时失败。

    Examples:
        >>> max_length(3)("test").render()
        'Must not contain more characters than 3'
    """

    def check(value: str, /) -> Message | None:
        return fail_if(len(value) > size, "max", size, catalog=catalog)

    return check


def min_length(size: int, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """Fail when the value has fewer than `size` characters.
    值的字符数少于 `size` 时失败。
    """

    def check(value: str, /) -> Message | None:
        return fail_if(len(value) < size, "min", size, catalog=catalog)

    return check


def length_within(lower: int, upper: int, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> Validator[str]:
    """Fail when the character count is outside `[lower, upper]`.
    字符数不在 `[lower, upper]` 范围内时失败。

    Raises:
        ValueError: When `lower > upper`.
            当 `lower > upper` 时抛出。
    """
    if lower > upper:
        raise ValueError(f"lower bound {lower} is greater than upper bound {upper}")

    def check(value: str, /) -> Message | None:
        return fail_if(not lower <= len(value) <= upper, "within", lower, upper, catalog=catalog)

    return check


def max_length_if_present(size: int, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> OptionalValidator[str]:
    """`max_length` that lets an absent value pass.
    缺省值直接通过的 `max_length`。
    """
    return if_present(max_length(size, catalog=catalog))


def min_length_if_present(size: int, *, catalog: MessageCatalog = DEFAULT_CATALOG) -> OptionalValidator[str]:
    return if_present(min_length(size, catalog=catalog))


def length_within_if_present(
    lower: int, upper: int, *, catalog: MessageCatalog = DEFAULT_CATALOG
) -> OptionalValidator[str]:
    return if_present(length_within(lower, upper, catalog=catalog))
