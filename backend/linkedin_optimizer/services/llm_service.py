"""
LLM Service — unified interface to all providers via LiteLLM.

Responsibilities:
  • Resolve a registry model key to a LiteLLM model id
  • Send one prompt, return the plain-text reply
  • Turn provider failures (auth, quota, network) into ServiceError
  • Pass an empty reply through as "", leaving the parser to degrade it
  • Expose registry metadata for the frontend

No retries: a failed call is reported straight back to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from linkedin_optimizer.config import MODELS, PROMPT_CONFIG, settings
from linkedin_optimizer.errors import ServiceError

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True
litellm.set_verbose = False


# ── Helpers ──────────────────────────────────────────────────────────────────

# Maps our provider key → the env var name that LiteLLM expects
PROVIDER_KEY_ENV = {
    "google": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def _resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise ServiceError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise ServiceError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


def default_api_key(provider: str) -> str | None:
    """Server-side key for a provider, from settings."""
    return {
        "google": settings.gemini_api_key,
        "groq": settings.groq_api_key,
        "openrouter": settings.openrouter_api_key,
    }.get(provider)


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: str,
    model_key: str,
    api_key: str | None,
    prompt: str,
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    timeout: float | None = None,
) -> str:
    """
    Send a single-prompt completion request via LiteLLM.

    Args:
        provider:    "google" | "groq" | "openrouter"
        model_key:   Key from MODELS registry (e.g. "gemini-1.5-flash")
        api_key:     API key for the provider
        prompt:      Sent as the only user message
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)
        timeout:     Seconds before the call is abandoned

    Returns:
        The assistant's response text.

    Raises:
        ServiceError: on a missing key, unknown model or provider failure.
    """
    model_id = _resolve_model_id(provider, model_key)
    if not api_key:
        raise ServiceError(
            f"No API key configured for provider '{provider}'. "
            f"Set {PROVIDER_KEY_ENV.get(provider, 'the provider key')}."
        )

    # Merge prompt config defaults → explicit overrides
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.3)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 1500)

    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": temp,
        "max_tokens": tokens,
        "timeout": timeout if timeout is not None else settings.llm_timeout_seconds,
        "api_key": api_key,
    }

    logger.info(f"LLM call: provider={provider} model={model_id} temp={temp} tokens={tokens}")

    try:
        response = await acompletion(**kwargs)
        content = response.choices[0].message.content
    except Exception as e:
        logger.error(f"LLM error ({provider}/{model_key}): {e}")
        raise ServiceError(str(e)) from e

    if not content:
        logger.warning(f"LLM returned an empty reply ({provider}/{model_key})")
        content = ""

    logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
    return content


# ── Provider Info ────────────────────────────────────────────────────────────


def get_providers_info() -> list[dict[str, Any]]:
    """
    Return a list of provider info dicts for the frontend.
    No secrets are exposed, only whether a server default key is configured.
    """
    providers = []
    for provider_key, models in MODELS.items():
        model_list = [
            {
                "key": model_key,
                "name": model_info["name"],
                "model_id": model_info["model_id"],
                "description": model_info["description"],
                "recommended": model_info.get("recommended", False),
                "default": (
                    provider_key == settings.default_provider
                    and model_key == settings.default_model_key
                ),
            }
            for model_key, model_info in models.items()
        ]
        providers.append({
            "id": provider_key,
            "name": _provider_display_name(provider_key),
            "models": model_list,
            "key_env_var": PROVIDER_KEY_ENV.get(provider_key, ""),
            "server_key_configured": bool(default_api_key(provider_key)),
        })
    return providers


def _provider_display_name(provider: str) -> str:
    return {
        "google": "Google AI Studio",
        "groq": "Groq",
        "openrouter": "OpenRouter",
    }.get(provider, provider.title())
