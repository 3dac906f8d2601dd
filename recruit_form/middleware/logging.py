from __future__ import annotations

import logging
import time

import httpx

logger = logging.getLogger("rf.request")

_STARTED_AT = "rf_started_at"


class RequestLoggingHooks:
    """httpx event hooks that log one line per completed outbound request."""

    async def on_request(self, request: httpx.Request) -> None:
        request.extensions[_STARTED_AT] = time.perf_counter()

    async def on_response(self, response: httpx.Response) -> None:
        request = response.request
        start = request.extensions.get(_STARTED_AT)
        duration_ms = int((time.perf_counter() - start) * 1000) if start is not None else None
        logger.info(
            "request_completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

    def as_event_hooks(self) -> dict[str, list]:
        return {"request": [self.on_request], "response": [self.on_response]}
