"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-17
@Docs: Helper utilities.
辅助工具。
"""

from adequate.helpers.rows import RowError, iter_rows, validate_rows

__all__ = ["RowError", "iter_rows", "validate_rows"]
