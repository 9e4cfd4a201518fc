"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation.py
@DateTime: 2026-10-17
@Docs: Aggregation engine and validation entry point.
聚合引擎与校验入口。

Every validator of a field runs in declaration order, failures included: a
field never short-circuits and no field stops the others. Fields that fully
pass are dropped; the rest form the Error in declaration order.
每个字段的校验器按声明顺序全部执行（失败也不短路），字段之间互不影响；
全部通过的字段被丢弃，其余字段按声明顺序组成 Error。

Examples:
    >>> from adequate import validate
    >>> from adequate.validators import max_length
    >>> text = "lorem ipsum dolor sit amet"
    >>> bool(validate(("name", text, [max_length(64)]), ("description", text, [max_length(255)])))
    True
    >>> result = validate(("name", text, [max_length(9)]))
    >>> result.error.render()
    {'name': ['Must not contain more characters than 9']}
"""

from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, NamedTuple

from adequate.config import ValidationConfig
from adequate.error import Error
from adequate.feedback import Feedback
from adequate.log import get_logger
from adequate.message import Message
from adequate.result import ValidationResult
from adequate.validators.base import Validator

logger = get_logger(__name__)


class FieldSpec(NamedTuple):
    """One field to validate: name, value and ordered validators.
    待校验字段：字段名、值与有序校验器列表。
    """

    name: str
    value: Any
    validators: Sequence[Validator[Any]]


def _as_spec(item: FieldSpec | tuple[str, Any, Sequence[Validator[Any]]]) -> FieldSpec:
    if isinstance(item, FieldSpec):
        return item
    try:
        name, value, validators = item
    except (TypeError, ValueError):
        raise TypeError(f"Expected (field, value, validators), got {item!r}") from None
    return FieldSpec(name, value, validators)


def check_field(name: str, value: Any, validators: Iterable[Validator[Any]]) -> Feedback:
    """Run every validator of one field and build its Feedback.
    执行单个字段的全部校验器并构建 Feedback。

    Args:
        name: Field name.
            字段名。
        value: Field value.
            字段值。
        validators: Validators in declaration order.
            按声明顺序排列的校验器。

    Returns:
        Feedback: Feedback holding every failure message, possibly empty.
            包含所有失败消息的 Feedback（可能为空）。

    Raises:
        TypeError: When a validator returns something other than Message or None.
            校验器返回值既不是 Message 也不是 None 时抛出。
    """
    messages: list[Message] = []
    for validator in validators:
        outcome = validator(value)
        if outcome is None:
            continue
        if not isinstance(outcome, Message):
            raise TypeError(
                f"Validator {validator!r} for field {name!r} returned {type(outcome).__name__}, expected Message or None"
            )
        messages.append(outcome)
    return Feedback(name, tuple(messages))


def collect(
    fields: Iterable[FieldSpec | tuple[str, Any, Sequence[Validator[Any]]]],
    *,
    max_workers: int | None = None,
) -> tuple[Feedback, ...]:
    """Validate all fields and keep the negative feedback.
    校验所有字段，仅保留失败反馈。

    Args:
        fields: Field triples in declaration order.
            按声明顺序排列的字段三元组。
        max_workers: Thread count; None or 1 runs sequentially.
            线程数；None 或 1 表示顺序执行。

    Returns:
        tuple[Feedback, ...]: Negative feedback in declaration order.
            按声明顺序排列的失败反馈。
    """
    specs = [_as_spec(f) for f in fields]
    workers = max_workers or 1
    if workers > 1 and len(specs) > 1:
        # Executor.map yields in submission order
        with ThreadPoolExecutor(max_workers=min(workers, len(specs))) as pool:
            feedbacks = list(pool.map(lambda s: check_field(s.name, s.value, s.validators), specs))
    else:
        feedbacks = [check_field(s.name, s.value, s.validators) for s in specs]
    return tuple(f for f in feedbacks if f.is_negative())


def validate(
    *fields: FieldSpec | tuple[str, Any, Sequence[Validator[Any]]],
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate a record given as (field, value, validators) triples.
    校验以 (字段, 值, 校验器列表) 三元组给出的记录。

    Pure and deterministic: the same inputs always give an equal result.
    纯函数且确定：相同输入总是得到相等的结果。

    Args:
        *fields: Field triples in declaration order.
            按声明顺序排列的字段三元组。
        config: Validation configuration (optional).
            校验配置（可选）。

    Returns:
        ValidationResult: Success, or an Error with every failing field.
            成功，或包含所有失败字段的 Error。
    """
    cfg = config or ValidationConfig()
    negative = collect(fields, max_workers=cfg.max_workers)
    logger.debug(
        "validation.completed",
        fields=len(fields),
        failed=[f.field for f in negative],
        workers=cfg.max_workers,
    )
    if not negative:
        return ValidationResult.ok()
    return ValidationResult.err(Error(negative))


def validate_mapping(
    record: Mapping[str, Any],
    rules: Mapping[str, Sequence[Validator[Any]]],
    *,
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate a mapping against `field -> validators` rules.
    按 `字段 -> 校验器列表` 规则校验映射。

    Fields are checked in rules order; a key missing from the record is
    passed to its validators as None.
    按规则顺序校验字段；记录中缺失的键以 None 传入校验器。

    Args:
        record: Record to validate.
            待校验记录。
        rules: Validators per field.
            每个字段的校验器。
        config: Validation configuration (optional).
            校验配置（可选）。
    """
    return validate(
        *(FieldSpec(name, record.get(name), validators) for name, validators in rules.items()),
        config=config,
    )
