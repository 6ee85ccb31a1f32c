"""
Request tracing middleware.

Every request gets a trace_id that is attached to all log lines emitted
while it is processed and echoed back in the X-Trace-ID response header.
"""

import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from fitness_tracker.core.logging import logger
from fitness_tracker.core.trace_context import trace_id_context

TRACE_ID_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that binds a trace_id to each request.

    A trace_id sent by the client in X-Trace-ID is reused; otherwise a
    new UUID is generated.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request with a trace_id in context.

        Args:
            request: HTTP request
            call_next: Next middleware/handler

        Returns:
            Response with X-Trace-ID header
        """
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid.uuid4())
        token = trace_id_context.set(trace_id)

        logger.info(f"Request started: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = trace_id

            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"- Status: {response.status_code}"
            )
            return response

        except Exception:
            logger.exception(f"Request failed: {request.method} {request.url.path}")
            raise

        finally:
            trace_id_context.reset(token)


__all__ = ["TRACE_ID_HEADER", "TraceIDMiddleware"]
