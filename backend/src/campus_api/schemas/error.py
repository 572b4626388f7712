"""Error response schema.

Every error response has the same body: {"message", "timestamp", "status"}.
The exception handlers in main.py build it from domain exceptions.
"""

import time

from pydantic import BaseModel, Field


def _now_millis() -> int:
    return int(time.time() * 1000)


class ErrorResponse(BaseModel):
    """Error body with a human-readable message, epoch-millis timestamp and HTTP status."""

    message: str
    timestamp: int = Field(default_factory=_now_millis)
    status: int
