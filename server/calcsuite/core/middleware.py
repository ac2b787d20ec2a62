from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from calcsuite.core.context import bind_request, get_request_id, unbind_request

logger = logging.getLogger("calcsuite.request")


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:
        incoming_id = request.headers.get("x-request-id")
        token = bind_request(incoming_id, path=request.url.path)
        request_id = get_request_id() or ""

        start_time = time.perf_counter()
        extra = {"method": request.method}
        logger.info("request.start", extra=extra)

        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            extra.update({"duration_ms": round(duration_ms, 2)})
            logger.info("request.end", extra=extra)
            unbind_request(token)

        response.headers["X-Request-ID"] = request_id
        return response
