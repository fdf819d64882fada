import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            process_time = (time.time() - start_time) * 1000  # ms

            # Route template rather than the concrete URL, so ids stay out of the path
            route_obj = request.scope.get("route")
            path = route_obj.path if route_obj else request.url.path

            logger.info(f"{request.method} {path} -> {status_code} ({process_time:.1f}ms)")
