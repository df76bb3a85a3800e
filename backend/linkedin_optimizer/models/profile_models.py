from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


# ── Request Models ──────────────────────────────────────────────────────────


class ProfileInput(BaseModel):
    """Profile text entered in the manual form."""

    headline: str = ""
    summary: str = ""
    experience: list[str] = []
    skills: list[str] = []


class AnalyzeRequest(BaseModel):
    """Body of POST /api/linkedin/analyze."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    linkedin_url: Optional[str] = Field(default=None, alias="linkedinUrl")
    profile_data: Optional[ProfileInput] = Field(default=None, alias="profileData")
    provider: Optional[str] = None
    model_key: Optional[str] = Field(default=None, alias="modelKey")


# ── Response Models ─────────────────────────────────────────────────────────


class OptimizationResult(BaseModel):
    """The four suggestion sections parsed from the model reply."""

    headline: str = ""
    keywords: list[str] = []
    experience: list[str] = []
    summary: str = ""


class ErrorResponse(BaseModel):
    """Error body returned on 4xx/5xx."""

    error: str
