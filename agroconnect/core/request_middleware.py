import time
import uuid

from agroconnect.core.logger import logger


class RequestLoggingMiddleware:
    """
    ASGI middleware that logs each HTTP request with its status and duration,
    and tags the response with an X-Request-ID header.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request_id = str(uuid.uuid4())
        scope["request_id"] = request_id
        method = scope.get("method", "")
        path = scope.get("path", "")
        status_code = {"status": None}

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code["status"] = message.get("status", 0)
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode("utf-8")))
                message["headers"] = headers
            await send(message)

        start = time.perf_counter()
        await self.app(scope, receive, send_wrapper)
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": method,
                "path": path,
                "status_code": status_code["status"],
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
