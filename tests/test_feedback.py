"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_feedback.py
@DateTime: 2026-10-17
@Docs: Tests for feedback.py module.
feedback.py 模块测试。
"""

import pytest

from adequate.feedback import Feedback
from adequate.message import Message


class TestIsNegative:
    """Tests for Feedback.is_negative.
    Feedback.is_negative 测试。
    """

    def test_empty_is_not_negative(self) -> None:
        assert not Feedback("name", []).is_negative()

    def test_default_is_not_negative(self) -> None:
        assert not Feedback("name").is_negative()

    def test_with_message_is_negative(self) -> None:
        assert Feedback("name", [Message("lorem ipsum")]).is_negative()


class TestFeedbackEq:
    """Tests for Feedback equality.
    Feedback 相等性测试。
    """

    def test_eq(self) -> None:
        a = Feedback("name", [Message("lorem ipsum")])
        assert a == a
        assert a == Feedback("name", [Message("lorem ipsum")])
        assert a != Feedback("description", [Message("lorem ipsum")])
        assert a != Feedback("name", [Message("lorem ipsum {0}", ["dolor sit amet"])])

    def test_list_and_tuple_inputs_equal(self) -> None:
        """Messages are normalised to a tuple / 消息被规范化为元组。"""
        m = Message("x")
        assert Feedback("f", [m]) == Feedback("f", (m,))
        assert isinstance(Feedback("f", [m]).messages, tuple)

    def test_message_order_matters(self) -> None:
        a, b = Message("a"), Message("b")
        assert Feedback("f", [a, b]) != Feedback("f", [b, a])

    def test_rejects_non_message(self) -> None:
        with pytest.raises(TypeError):
            Feedback("f", ["plain text"])  # type: ignore[list-item]


class TestFeedbackRender:
    """Tests for Feedback rendering.
    Feedback 渲染测试。
    """

    def test_render(self) -> None:
        f = Feedback("name", [Message("Must contain {0}", ["a"]), Message("Error")])
        assert f.render() == ["Must contain a", "Error"]

    def test_str(self) -> None:
        f = Feedback("name", [Message("a"), Message("b")])
        assert str(f) == "name: a; b"

    def test_to_dict(self) -> None:
        f = Feedback("name", [Message("Must contain {0}", ["a"])])
        assert f.to_dict() == {"field": "name", "messages": ["Must contain a"]}
