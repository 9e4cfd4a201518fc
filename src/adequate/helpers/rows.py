"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rows.py
@DateTime: 2026-10-17
@Docs: Batch validation over tabular rows without exposing Polars details.
表格行批量校验（隐藏 Polars 细节）。
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from adequate.config import ValidationConfig
from adequate.error import Error
from adequate.validation import validate_mapping
from adequate.validators.base import Validator


@dataclass(frozen=True, slots=True)
class RowError:
    """Error of one failing row.
    单个失败行的错误。

    Attributes:
        row_number: Row number.
            行号。
        error: Aggregated error of the row.
            该行的聚合错误。
    """

    row_number: int
    error: Error


def iter_rows(data: Any) -> Iterator[dict[str, Any]]:
    """Iterate rows as dictionaries.
    以字典形式迭代行。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射行可迭代对象或单个映射。
    """
    if _is_polars_df(data):
        yield from data.to_dicts()
        return
    if isinstance(data, Mapping):
        yield dict(data)
        return
    if isinstance(data, (str, bytes)):
        raise TypeError("rows must be iterable mappings / 行数据必须是可迭代的映射")
    if isinstance(data, Iterable):
        for row in data:
            yield dict(row)
        return
    raise TypeError("rows must be iterable mappings / 行数据必须是可迭代的映射")


def validate_rows(
    data: Any,
    rules: Mapping[str, Sequence[Validator[Any]]],
    *,
    config: ValidationConfig | None = None,
    start: int = 1,
) -> list[RowError]:
    """Validate every row and return the failing ones.
    校验每一行并返回失败的行。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射行可迭代对象或单个映射。
        rules: Validators per field.
            每个字段的校验器。
        config: Validation configuration (optional).
            校验配置（可选）。
        start: Number of the first row (default: 1).
            首行行号（默认 1）。
    Returns:
        list[RowError]: Failing rows in row order.
            按行顺序排列的失败行。
    """
    out: list[RowError] = []
    for number, row in enumerate(iter_rows(data), start=start):
        result = validate_mapping(row, rules, config=config)
        if result.error is not None:
            out.append(RowError(number, result.error))
    return out


def _is_polars_df(value: Any) -> bool:
    """Return True if the value is a Polars DataFrame.
    如果值是 Polars DataFrame 则返回 True。

    polars is imported lazily so it stays an optional dependency.
    polars 按需延迟导入，保持为可选依赖。
    """
    try:
        import polars as pl  # type: ignore
    except ImportError:
        return False
    return isinstance(value, pl.DataFrame)
