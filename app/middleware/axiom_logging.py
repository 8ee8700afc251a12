"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request: method, path, params, masked
request body, status code, duration, and for error responses the detail
message plus the ``GlobalErrorCode`` name rendered by ``app.main``.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|credential|email)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_DETAIL_LEN = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def parse_error_body(body: bytes) -> tuple[str, str | None]:
    """에러 응답 본문에서 (메시지, 에러 코드)를 추출합니다.

    Extract ``(detail, code)`` from an error response body. ``code`` is None
    for errors not raised as ``GlobalException`` (validation, auth).
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_DETAIL_LEN], None

    if not isinstance(data, dict):
        return str(data)[:_MAX_DETAIL_LEN], None
    detail = data.get("detail", data)
    if not isinstance(detail, str):
        detail = json.dumps(detail, ensure_ascii=False, default=str)
    return detail[:_MAX_DETAIL_LEN], data.get("code")


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom. Passes
    requests straight through when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body_bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return mask_sensitive(json.loads(body_bytes))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def _buffer_error_response(self, response: Response) -> tuple[Response, str, str | None]:
        """에러 응답 본문을 읽어 사유를 추출하고 응답을 재구성합니다.

        Consume the streamed error body, extract detail/code and rebuild an
        equivalent response.
        """
        resp_body = b""
        async for chunk in response.body_iterator:
            resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

        detail, code = parse_error_body(resp_body)
        rebuilt = Response(
            content=resp_body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type,
        )
        return rebuilt, detail, code

    def _send(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        event: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))
        request_body = await self._read_body(request)
        if request_body is not None:
            event["request_body"] = request_body

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            if status_code >= 400:
                response, detail, code = await self._buffer_error_response(response)
                event["error"] = detail
                if code:
                    event["error_code"] = code
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            self._send(event)

        return response
