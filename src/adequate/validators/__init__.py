"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-17
@Docs: Validator contract and leaf validators.
校验器契约与叶子校验器。
"""

from adequate.validators.base import OptionalValidator, Validator, fail_if, if_present
from adequate.validators.contain import (
    contains,
    contains_if_given,
    contains_if_present,
    not_contain,
    not_contain_if_given,
    not_contain_if_present,
)
from adequate.validators.length import (
    length_within,
    length_within_if_present,
    max_length,
    max_length_if_present,
    min_length,
    min_length_if_present,
)

__all__ = [
    "Validator",
    "OptionalValidator",
    "fail_if",
    "if_present",
    "contains",
    "contains_if_given",
    "contains_if_present",
    "not_contain",
    "not_contain_if_given",
    "not_contain_if_present",
    "max_length",
    "max_length_if_present",
    "min_length",
    "min_length_if_present",
    "length_within",
    "length_within_if_present",
]
