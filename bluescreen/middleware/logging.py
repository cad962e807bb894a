"""
Request logging middleware.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bluescreen.utils.logging import get_logger, log_request

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its method, path, status and duration.

    Each request gets a ``request_id`` (stored on ``request.state`` and echoed
    in the ``X-Request-ID`` response header) so log lines can be correlated.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = uuid.uuid4().hex
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log_request(logger, request.method, request.url.path, 500, duration_ms, request_id)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        log_request(logger, request.method, request.url.path, response.status_code, duration_ms, request_id)
        return response
