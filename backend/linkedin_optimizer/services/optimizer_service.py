"""
Optimizer Service — turn profile text into optimization suggestions.

Responsibilities:
  • Render the fixed prompt template from a ProfileInput
  • Submit it through llm_service.complete()
  • Parse the plain-text reply into an OptimizationResult
"""

from __future__ import annotations

import logging

from linkedin_optimizer.models.profile_models import OptimizationResult, ProfileInput
from linkedin_optimizer.prompts.profile_optimizer import USER_PROMPT_TEMPLATE
from linkedin_optimizer.services.llm_service import complete
from linkedin_optimizer.services.response_parser import parse_response

logger = logging.getLogger(__name__)


def build_prompt(profile: ProfileInput) -> str:
    """Interpolate the profile into the prompt template. No escaping is applied."""
    return USER_PROMPT_TEMPLATE.format(
        headline=profile.headline,
        summary=profile.summary,
        experience="\n".join(profile.experience),
        skills=", ".join(profile.skills),
    )


async def optimize_profile(
    *,
    profile: ProfileInput,
    provider: str,
    model_key: str,
    api_key: str | None,
) -> OptimizationResult:
    """Ask the model for suggestions on a profile and parse its reply."""
    prompt = build_prompt(profile)

    logger.info(
        f"Optimizing profile: {len(profile.experience)} experience lines, "
        f"{len(profile.skills)} skills, via {provider}/{model_key}"
    )

    raw = await complete(
        provider=provider,
        model_key=model_key,
        api_key=api_key,
        prompt=prompt,
        prompt_name="profile_optimizer",
    )

    result = parse_response(raw)
    if not (result.headline or result.keywords or result.experience or result.summary):
        logger.warning(f"No known sections in model reply: {raw[:200]!r}")
    return result
