"""
Middleware HTTP global : durée de traitement et timeout par requête.
"""

import asyncio
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI, *, timeout_seconds: float = 0) -> None:
    """timeout_seconds=0 désactive le timeout."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        try:
            if timeout_seconds:
                response = await asyncio.wait_for(call_next(request), timeout=timeout_seconds)
            else:
                response = await call_next(request)
        except asyncio.TimeoutError:
            logger.warning("%s %s timed out after %.1fs", request.method, request.url.path, timeout_seconds)
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={"message": "Request timed out"},
            )
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s -> %s (%.3fs)", request.method, request.url.path, response.status_code, elapsed)
        return response
