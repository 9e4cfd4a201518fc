"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-17
@Docs: Shared test fixtures for the adequate test suite.
测试套件的公共 fixtures。
"""

from typing import Any

import pytest

from adequate.message import Message
from adequate.validators.base import Validator

LOREM = "lorem ipsum dolor sit amet"


def always_fail(text: str = "Error") -> Validator[Any]:
    """Build a validator that always fails with `text`.
    构建总是以 `text` 失败的校验器。
    """

    def check(value: Any, /) -> Message | None:
        return Message(text)

    return check


def always_pass() -> Validator[Any]:
    """Build a validator that always succeeds.
    构建总是通过的校验器。
    """

    def check(value: Any, /) -> Message | None:
        return None

    return check


@pytest.fixture
def text() -> str:
    """A 26-character sample text.
    26 个字符的样本文本。
    """
    return LOREM


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from ADEQUATE_* environment variables.
    隔离 ADEQUATE_* 环境变量。
    """
    monkeypatch.delenv("ADEQUATE_MAX_WORKERS", raising=False)
