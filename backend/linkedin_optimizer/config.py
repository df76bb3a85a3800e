from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "LinkedIn Profile Optimizer"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:3000"

    # LLM API Keys (server defaults; a request header can override them)
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None

    # LLM routing
    default_provider: str = "google"
    default_model_key: str = "gemini-1.5-flash"
    llm_timeout_seconds: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "google": {
        "gemini-1.5-flash": {
            "name": "Gemini 1.5 Flash",
            "model_id": "gemini/gemini-1.5-flash",
            "description": "Fast, follows the section format reliably",
            "recommended": True,
        },
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
            "description": "Newer Gemini, stronger rewrites",
            "recommended": False,
        },
    },
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Good all-rounder for profile copy",
            "recommended": True,
        },
    },
    "openrouter": {
        "kimi-k2": {
            "name": "Kimi K2",
            "model_id": "openrouter/moonshotai/kimi-k2:free",
            "description": "Free tier, best for tech-heavy profiles",
            "recommended": False,
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "profile_optimizer": {"temperature": 0.7, "max_tokens": 1500},
}
