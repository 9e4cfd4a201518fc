"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-17
@Docs: Validation configuration helpers.
校验配置助手。

Configuration is resolved once at startup and passed explicitly to
`validate()` and to the leaf validators.
配置在启动时解析一次，并显式传递给 `validate()` 与叶子校验器。

Environment variables / 环境变量:
        - ADEQUATE_MAX_WORKERS:
            Thread count for per-field evaluation (default: 1, sequential).
            逐字段校验使用的线程数（默认 1，即顺序执行）。

Examples:
        >>> from adequate.config import resolve_config
        >>> cfg = resolve_config(max_workers=1)
        >>> cfg.catalog.template("contains")
        'Must contain {0}'

        Override a template / 覆盖模板:

        >>> cfg = resolve_config(messages={"contains": "Should include {0}"})
        >>> cfg.catalog.message("contains", "x").render()
        'Should include x'
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from adequate.catalog import DEFAULT_CATALOG, MessageCatalog
from adequate.exceptions import AdequateError


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validation configuration.

    校验配置。

    Attributes:
        catalog: Message catalog used by leaf validators.
            叶子校验器使用的消息目录。
        max_workers: Thread count for per-field evaluation; 1 runs sequentially.
            逐字段校验的线程数；1 表示顺序执行。
    """

    catalog: MessageCatalog = field(default_factory=lambda: DEFAULT_CATALOG)
    max_workers: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise AdequateError(
                message=f"max_workers must be a positive integer, got {self.max_workers!r}",
                details={"max_workers": self.max_workers},
                error_code="invalid_config",
            )


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_workers(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise AdequateError(
            message=f"{name} must be an integer, got {value!r}",
            details={name: value},
            error_code="invalid_config",
        ) from None


def resolve_config(
    *,
    messages: Mapping[str, str] | None = None,
    max_workers: int | None = None,
    env_prefix: str = "ADEQUATE",
) -> ValidationConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_MAX_WORKERS`
           环境变量：`{env_prefix}_MAX_WORKERS`
        3) defaults / 默认值

    Args:
        messages: Template overrides merged over the default catalog.
            合并到默认目录之上的模板覆盖项。
        max_workers: Thread count for per-field evaluation.
            逐字段校验的线程数。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 ADEQUATE）。

    Returns:
        A ValidationConfig instance.
            返回 ValidationConfig 配置实例。

    Raises:
        AdequateError: When a worker count is not a positive integer.
            线程数不是正整数时抛出。
    """
    catalog = DEFAULT_CATALOG.merged(messages) if messages else DEFAULT_CATALOG

    if max_workers is None:
        env_name = f"{env_prefix}_MAX_WORKERS"
        env_workers = _env_get(env_name)
        max_workers = _parse_workers(env_workers, env_name) if env_workers else 1

    return ValidationConfig(catalog=catalog, max_workers=max_workers)
