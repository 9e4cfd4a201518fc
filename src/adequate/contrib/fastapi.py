"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: fastapi.py
@DateTime: 2026-10-17
@Docs: FastAPI integration for validation errors.
校验错误的 FastAPI 集成。

Examples:
    >>> from fastapi import FastAPI
    >>> from adequate.contrib.fastapi import install_exception_handler
    >>> app = FastAPI()
    >>> install_exception_handler(app)

    Inside an endpoint / 在接口中:

        validate(("name", payload.name, [max_length(64)])).raise_for_error()
"""

from adequate.error import Error
from adequate.exceptions import AdequateError, ValidationFailed
from adequate.schemas import error_response

try:
    from fastapi import FastAPI, HTTPException, Request
    from fastapi.responses import JSONResponse
except ImportError as exc:  # pragma: no cover / 覆盖忽略
    raise AdequateError(
        message="Missing optional dependencies for FastAPI integration. Install extras: fastapi / 缺少 FastAPI 集成可选依赖，请安装: fastapi",
        details={"error": str(exc)},
        error_code="missing_dependency",
    ) from exc


def to_http_exception(error: Error, *, status_code: int = 422) -> HTTPException:
    """Convert an Error into an HTTPException.
    将 Error 转换为 HTTPException。

    Args:
        error: Aggregated validation error.
            聚合后的校验错误。
        status_code: HTTP status code (default: 422).
            HTTP 状态码（默认 422）。
    """
    return HTTPException(status_code=status_code, detail=error_response(error).model_dump())


async def validation_failed_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render ValidationFailed as a JSON response.
    将 ValidationFailed 渲染为 JSON 响应。
    """
    if not isinstance(exc, ValidationFailed):
        raise exc
    body = error_response(exc.error, detail=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def install_exception_handler(app: FastAPI) -> None:
    """Register the ValidationFailed handler on an app.
    在应用上注册 ValidationFailed 处理器。
    """
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
