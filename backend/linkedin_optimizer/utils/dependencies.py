"""
Request-scoped helpers — extract per-request API keys from headers.
"""

from __future__ import annotations

from fastapi import Header
from typing import Optional

from linkedin_optimizer.services.llm_service import default_api_key


class APIKeys:
    """Container for per-request API keys extracted from headers."""

    def __init__(
        self,
        google: str | None = None,
        groq: str | None = None,
        openrouter: str | None = None,
    ):
        self.google = google
        self.groq = groq
        self.openrouter = openrouter

    def get_key(self, provider: str) -> str | None:
        """Header key for a provider, falling back to the server default."""
        header_keys = {"google": self.google, "groq": self.groq, "openrouter": self.openrouter}
        return header_keys.get(provider) or default_api_key(provider)


async def get_api_keys(
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(
        google=x_google_key or None,
        groq=x_groq_key or None,
        openrouter=x_openrouter_key or None,
    )
