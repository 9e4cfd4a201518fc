"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-17
@Docs: Package exports for adequate.
adequate 包导出定义。
"""

from adequate.catalog import DEFAULT_CATALOG, DEFAULT_MESSAGES, MessageCatalog
from adequate.config import ValidationConfig, resolve_config
from adequate.error import Error
from adequate.exceptions import AdequateError, CatalogKeyError, MessageFormatError, ValidationFailed
from adequate.feedback import Feedback
from adequate.helpers.rows import RowError, iter_rows, validate_rows
from adequate.message import Message
from adequate.result import ValidationResult
from adequate.validation import FieldSpec, check_field, collect, validate, validate_mapping
from adequate.validators import OptionalValidator, Validator, fail_if, if_present

__all__ = [
    "Message",
    "Feedback",
    "Error",
    "ValidationResult",
    "FieldSpec",
    "check_field",
    "collect",
    "validate",
    "validate_mapping",
    "Validator",
    "OptionalValidator",
    "fail_if",
    "if_present",
    "MessageCatalog",
    "DEFAULT_CATALOG",
    "DEFAULT_MESSAGES",
    "ValidationConfig",
    "resolve_config",
    "AdequateError",
    "MessageFormatError",
    "CatalogKeyError",
    "ValidationFailed",
    "RowError",
    "iter_rows",
    "validate_rows",
]
