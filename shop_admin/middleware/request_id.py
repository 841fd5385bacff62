"""Request ID middleware.

Forwards a sanitized client X-Request-ID or generates one, exposes it on
``request.state.request_id`` and echoes it on the response. Raw ASGI.
"""

import re
import uuid
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _header_value(scope: dict, name: str) -> str | None:
    wanted = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("utf-8", errors="replace")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Return raw when it is a safe token, else a fresh UUID (keeps logs clean)."""
    candidate = (raw or "").strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return str(uuid.uuid4())
    return candidate


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request id to every HTTP request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(_header_value(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_header(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_name.lower().encode(), request_id.encode()),
                ]
            await send(message)

        await app(scope, receive, send_with_header)

    return asgi_app
