"""Tests for prompt construction and the optimize pipeline."""

from unittest.mock import AsyncMock, patch

import pytest

from linkedin_optimizer.errors import ServiceError
from linkedin_optimizer.models.profile_models import ProfileInput
from linkedin_optimizer.services.optimizer_service import build_prompt, optimize_profile


@pytest.fixture
def profile() -> ProfileInput:
    return ProfileInput(
        headline="Software Engineer at Acme",
        summary="I build web apps.",
        experience=["Built billing service", "Mentored two interns"],
        skills=["Python", "SQL", "AWS"],
    )


class TestBuildPrompt:
    """Prompt template rendering."""

    def test_profile_block(self, profile: ProfileInput) -> None:
        prompt = build_prompt(profile)

        assert prompt.startswith(
            "You are a professional LinkedIn profile optimizer. Analyze this LinkedIn profile "
            "data and provide optimization suggestions in a structured format:\n\n"
            "Profile Data:\n"
            "Headline: Software Engineer at Acme\n"
            "Summary: I build web apps.\n"
            "Experience: Built billing service\nMentored two interns\n"
            "Skills: Python, SQL, AWS\n\n"
        )

    def test_sections_requested_in_order(self, profile: ProfileInput) -> None:
        prompt = build_prompt(profile)

        positions = [prompt.index(h) for h in ("HEADLINE:", "KEYWORDS:", "EXPERIENCE:", "SUMMARY:")]
        assert positions == sorted(positions)
        assert prompt.endswith("SUMMARY:\n[Your optimized summary suggestion]")

    def test_no_escaping(self) -> None:
        prompt = build_prompt(ProfileInput(headline="{braces} & <tags>", skills=["C++"]))

        assert "Headline: {braces} & <tags>\n" in prompt
        assert "Skills: C++\n" in prompt

    def test_empty_profile(self) -> None:
        prompt = build_prompt(ProfileInput())

        assert "Headline: \nSummary: \nExperience: \nSkills: \n" in prompt

    def test_deterministic(self, profile: ProfileInput) -> None:
        assert build_prompt(profile) == build_prompt(profile.model_copy(deep=True))


class TestOptimizeProfile:
    """Prompt → model → parser wiring."""

    async def test_parses_model_reply(self, profile: ProfileInput) -> None:
        reply = "HEADLINE:\nBackend Engineer\n\nKEYWORDS:\n- Python\n\nSUMMARY:\nShips."
        with patch(
            "linkedin_optimizer.services.optimizer_service.complete",
            new=AsyncMock(return_value=reply),
        ) as mock_complete:
            result = await optimize_profile(
                profile=profile, provider="google", model_key="gemini-1.5-flash", api_key="k"
            )

        assert result.headline == "Backend Engineer"
        assert result.keywords == ["Python"]
        assert result.experience == []
        assert result.summary == "Ships."

        kwargs = mock_complete.await_args.kwargs
        assert kwargs["prompt"] == build_prompt(profile)
        assert kwargs["provider"] == "google"
        assert kwargs["model_key"] == "gemini-1.5-flash"
        assert kwargs["api_key"] == "k"
        assert kwargs["prompt_name"] == "profile_optimizer"

    async def test_service_error_propagates(self, profile: ProfileInput) -> None:
        with patch(
            "linkedin_optimizer.services.optimizer_service.complete",
            new=AsyncMock(side_effect=ServiceError("quota exceeded")),
        ):
            with pytest.raises(ServiceError, match="quota exceeded"):
                await optimize_profile(
                    profile=profile, provider="google", model_key="gemini-1.5-flash", api_key="k"
                )
