"""Request timeout middleware: 504 JSON when a request overruns. Raw ASGI."""

import asyncio
import json
from typing import Callable

from shop_admin.shared.telemetry import get_logger

logger = get_logger(__name__)


def _timeout_body(timeout_seconds: float) -> bytes:
    return json.dumps(
        {
            "error": "GATEWAY_TIMEOUT",
            "message": f"Request timed out after {timeout_seconds} seconds",
            "details": {"timeout_seconds": timeout_seconds},
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel a request after timeout_seconds.

    The 504 is only sent when the response has not started; a request that
    times out mid-stream is cut off.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def tracking_send(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, tracking_send), timeout=float(timeout_seconds)
            )
        except TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                return
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [(b"content-type", b"application/json")],
            })
            await send({
                "type": "http.response.body",
                "body": _timeout_body(timeout_seconds),
                "more_body": False,
            })

    return asgi_app
