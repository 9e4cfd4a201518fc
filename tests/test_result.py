"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_result.py
@DateTime: 2026-10-17
@Docs: Tests for result.py module.
result.py 模块测试。
"""

import pytest

from adequate.error import Error
from adequate.exceptions import ValidationFailed
from adequate.feedback import Feedback
from adequate.message import Message
from adequate.result import ValidationResult


def _error() -> Error:
    return Error((Feedback("name", [Message("Must contain {0}", ["x"])]),))


class TestValidationResult:
    """Tests for ValidationResult.
    ValidationResult 测试。
    """

    def test_ok(self) -> None:
        r = ValidationResult.ok()
        assert r.is_ok
        assert not r.is_err
        assert bool(r) is True
        assert r.error is None

    def test_err(self) -> None:
        r = ValidationResult.err(_error())
        assert r.is_err
        assert not r.is_ok
        assert bool(r) is False
        assert r.error == _error()

    def test_equality(self) -> None:
        assert ValidationResult.ok() == ValidationResult.ok()
        assert ValidationResult.err(_error()) == ValidationResult.err(_error())
        assert ValidationResult.ok() != ValidationResult.err(_error())

    def test_raise_for_error_noop_on_ok(self) -> None:
        ValidationResult.ok().raise_for_error()

    def test_raise_for_error(self) -> None:
        with pytest.raises(ValidationFailed) as exc_info:
            ValidationResult.err(_error()).raise_for_error()
        exc = exc_info.value
        assert exc.error == _error()
        assert exc.status_code == 422
        assert exc.error_code == "validation_failed"
        assert exc.details == {"name": ["Must contain x"]}

    def test_raise_for_error_status_code(self) -> None:
        with pytest.raises(ValidationFailed) as exc_info:
            ValidationResult.err(_error()).raise_for_error(status_code=400)
        assert exc_info.value.status_code == 400
