"""
Employee Service: Request ID Middleware
==========================================

What:  Assigns a correlation ID to each request and returns it in the
       X-Request-ID response header.
Why:   Every log line and error body from one request shares the same ID.
How:   Uses the client's X-Request-ID when present, otherwise a short UUID.
       The ID is stored in a ContextVar (for loggers and exception handlers)
       and on request.state (for route handlers).
When:  Outermost middleware, so the access log and every error handler see it.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ── Context Variable ──────────────────────────────────────────────────────
# What: Coroutine-local storage for the current request ID
# Why ContextVar: concurrent requests share one event loop thread, so
# threading.local would hand every request the same slot
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Reuse the caller's X-Request-ID if one was sent
        2. Otherwise generate a short UUID
        3. Publish it to the ContextVar and request.state
        4. Echo it in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough for correlation and stays readable in logs
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        # ContextVar for loggers and exception handlers
        request_id_var.set(rid)
        # request.state for route handlers
        request.state.request_id = rid

        response = await call_next(request)

        # Lets a client quote the ID when reporting a failed call
        response.headers["X-Request-ID"] = rid
        return response
