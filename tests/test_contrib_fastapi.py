"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_contrib_fastapi.py
@DateTime: 2026-10-17
@Docs: Tests for FastAPI contrib integration.
FastAPI 贡献集成测试。
"""

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi import FastAPI, HTTPException  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from adequate.contrib.fastapi import install_exception_handler, to_http_exception  # noqa: E402
from adequate.error import Error  # noqa: E402
from adequate.feedback import Feedback  # noqa: E402
from adequate.message import Message  # noqa: E402
from adequate.validation import validate  # noqa: E402
from adequate.validators import max_length  # noqa: E402


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    install_exception_handler(app)

    @app.get("/names/{name}")
    def check_name(name: str) -> dict[str, str]:
        validate(("name", name, [max_length(5)])).raise_for_error()
        return {"name": name}

    return TestClient(app)


class TestExceptionHandler:
    """Tests for install_exception_handler.
    install_exception_handler 测试。
    """

    def test_valid_request(self, client: TestClient) -> None:
        resp = client.get("/names/bob")
        assert resp.status_code == 200
        assert resp.json() == {"name": "bob"}

    def test_invalid_request(self, client: TestClient) -> None:
        resp = client.get("/names/bartholomew")
        assert resp.status_code == 422
        body = resp.json()
        assert body["detail"] == "Validation failed"
        assert body["errors"] == [
            {
                "field": "name",
                "messages": [
                    {
                        "text": "Must not contain more characters than 5",
                        "template": "Must not contain more characters than {0}",
                        "args": ["5"],
                    }
                ],
            }
        ]


class TestToHttpException:
    """Tests for to_http_exception.
    to_http_exception 测试。
    """

    def test_payload(self) -> None:
        error = Error((Feedback("name", [Message("Error")]),))
        exc = to_http_exception(error)
        assert isinstance(exc, HTTPException)
        assert exc.status_code == 422
        assert exc.detail["errors"][0]["field"] == "name"

    def test_status_code(self) -> None:
        error = Error((Feedback("name", [Message("Error")]),))
        assert to_http_exception(error, status_code=400).status_code == 400
