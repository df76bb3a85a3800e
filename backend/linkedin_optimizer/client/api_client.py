"""
HTTP client for the analyze endpoint, used by the optimizer form.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from linkedin_optimizer.models.profile_models import OptimizationResult

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/linkedin/analyze"
ANALYZE_FAILED_MESSAGE = "Failed to analyze profile"


class OptimizerClientError(Exception):
    """The analyze request failed; ``message`` is safe to show the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class OptimizerClient:
    """Posts form payloads to the server and returns parsed suggestions."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 90.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def analyze(self, payload: dict[str, Any]) -> OptimizationResult:
        """POST one payload and return the parsed result, or raise OptimizerClientError."""
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                resp = await client.post(ANALYZE_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Analyze request failed: {e}")
            raise OptimizerClientError(str(e) or ANALYZE_FAILED_MESSAGE) from e

        if resp.is_error:
            raise OptimizerClientError(_error_message(resp), status_code=resp.status_code)

        try:
            return OptimizationResult.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unreadable analyze response: {e}")
            raise OptimizerClientError(ANALYZE_FAILED_MESSAGE, status_code=resp.status_code) from e


def _error_message(resp: httpx.Response) -> str:
    """Pull the server's ``error`` field, falling back to a generic message."""
    try:
        body = resp.json()
    except ValueError:
        return ANALYZE_FAILED_MESSAGE
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return ANALYZE_FAILED_MESSAGE
