"""FastAPI middleware for request tracing, metrics, and domain error mapping"""

import uuid
import time
import logging
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from budget_gateway.domain.exceptions import InvalidRecordError, RecordNotFoundError
from budget_gateway.infrastructure.observability.metrics import request_duration_histogram

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for distributed tracing"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request metrics"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        # Route template keeps record ids out of the label set
        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)
        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
        ).observe(duration)

        return response


async def _handle_not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    """Return 404 for records missing or owned by another user"""
    logger.info("Record not found: %s", exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _handle_invalid_record(request: Request, exc: InvalidRecordError) -> JSONResponse:
    """Return 400 for malformed identifiers or inconsistent updates"""
    logger.info("Invalid record: %s", exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Map domain exceptions raised by repositories to HTTP responses"""
    app.add_exception_handler(RecordNotFoundError, _handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidRecordError, _handle_invalid_record)  # type: ignore[arg-type]
