"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_validators_length.py
@DateTime: 2026-10-17
@Docs: Tests for validators/length.py module.
validators/length.py 模块测试。
"""

import pytest

from adequate.catalog import MessageCatalog
from adequate.message import Message
from adequate.validators import (
    length_within,
    length_within_if_present,
    max_length,
    max_length_if_present,
    min_length,
    min_length_if_present,
)


class TestMaxLength:
    """Tests for max_length.
    max_length 测试。
    """

    def test_ok(self) -> None:
        assert max_length(9)("test") is None

    def test_boundary_ok(self) -> None:
        assert max_length(4)("test") is None

    def test_err(self) -> None:
        assert max_length(3)("test") is not None

    def test_err_message(self) -> None:
        m = max_length(3)("test")
        assert m is not None
        assert m.render() == "Must not contain more characters than 3"

    def test_counts_characters(self) -> None:
        """Length counts characters, not bytes / 按字符而非字节计数。"""
        assert max_length(2)("ßé") is None

    def test_custom_catalog(self) -> None:
        catalog = MessageCatalog({"max": "At most {0}"})
        assert max_length(1, catalog=catalog)("ab") == Message("At most {0}", ["1"])


class TestMaxLengthIfPresent:
    """Tests for max_length_if_present.
    max_length_if_present 测试。
    """

    def test_absent_ok(self) -> None:
        assert max_length_if_present(3)(None) is None

    def test_present_err(self) -> None:
        m = max_length_if_present(3)("test")
        assert m is not None
        assert m.args == ("3",)

    def test_present_ok(self) -> None:
        assert max_length_if_present(4)("test") is None


class TestMinLength:
    """Tests for min_length.
    min_length 测试。
    """

    def test_ok(self) -> None:
        assert min_length(4)("test") is None

    def test_err_message(self) -> None:
        m = min_length(5)("test")
        assert m is not None
        assert m.render() == "Must not contain less characters than 5"

    def test_if_present(self) -> None:
        assert min_length_if_present(5)(None) is None
        assert min_length_if_present(5)("test") is not None


class TestLengthWithin:
    """Tests for length_within.
    length_within 测试。
    """

    @pytest.mark.parametrize("value", ["ab", "abc", "abcd"])
    def test_inside(self, value: str) -> None:
        assert length_within(2, 4)(value) is None

    @pytest.mark.parametrize("value", ["", "a", "abcde"])
    def test_outside(self, value: str) -> None:
        m = length_within(2, 4)(value)
        assert m is not None
        assert m.render() == "Must contain characters within a range of 2-4"

    def test_invalid_bounds(self) -> None:
        with pytest.raises(ValueError):
            length_within(5, 2)

    def test_if_present(self) -> None:
        assert length_within_if_present(2, 4)(None) is None
        assert length_within_if_present(2, 4)("a") is not None
