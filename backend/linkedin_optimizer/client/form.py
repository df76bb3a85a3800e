"""
Optimizer Form — headless state for the profile optimizer page.

Holds the two input modes (LinkedIn URL or manual fields), the submit
lifecycle (idle → submitting → success | failed), the last result, the
dismissible notification, and copy-to-clipboard feedback.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from linkedin_optimizer.client.api_client import (
    ANALYZE_FAILED_MESSAGE,
    OptimizerClient,
    OptimizerClientError,
)
from linkedin_optimizer.client.clipboard import Clipboard, ClipboardError, MemoryClipboard
from linkedin_optimizer.models.profile_models import OptimizationResult, ProfileInput

logger = logging.getLogger(__name__)

COPIED_FEEDBACK_SECONDS = 2.0


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class InputView(str, Enum):
    URL = "url"
    MANUAL = "manual"


class Section(str, Enum):
    """Result sections that can be copied."""

    HEADLINE = "headline"
    KEYWORDS = "keywords"
    EXPERIENCE = "experience"
    SUMMARY = "summary"


# ── Input Modes ─────────────────────────────────────────────────────────────


class UrlInput(BaseModel):
    """LinkedIn URL mode."""

    kind: Literal["url"] = "url"
    url: str = ""

    def is_blank(self) -> bool:
        return not self.url.strip()

    def to_payload(self) -> dict[str, Any]:
        return {"linkedinUrl": self.url}


class ManualInput(BaseModel):
    """Manual mode. List fields always keep at least one slot."""

    kind: Literal["manual"] = "manual"
    headline: str = ""
    summary: str = ""
    experience: list[str] = Field(default_factory=lambda: [""])
    skills: list[str] = Field(default_factory=lambda: [""])

    def is_blank(self) -> bool:
        return not (
            self.headline.strip()
            or self.summary.strip()
            or any(exp.strip() for exp in self.experience)
            or any(skill.strip() for skill in self.skills)
        )

    def to_profile(self) -> ProfileInput:
        return ProfileInput(
            headline=self.headline,
            summary=self.summary,
            experience=list(self.experience),
            skills=list(self.skills),
        )

    def to_payload(self) -> dict[str, Any]:
        return {"profileData": self.to_profile().model_dump()}


ProfileFormInput = Union[UrlInput, ManualInput]


class Notification(BaseModel):
    """A dismissible alert shown over the page."""

    title: str
    description: str


# ── Form ────────────────────────────────────────────────────────────────────


class OptimizerForm:
    """State machine behind the optimizer page.

    Without a clipboard, copies go to a MemoryClipboard, readable as
    ``form.clipboard.text`` when running headless.
    """

    def __init__(self, client: OptimizerClient, clipboard: Clipboard | None = None):
        self.client = client
        self.clipboard: Clipboard = clipboard if clipboard is not None else MemoryClipboard()

        self.view = InputView.URL
        self.url_input = UrlInput()
        self.manual_input = ManualInput()

        self.status = FormStatus.IDLE
        self.result: Optional[OptimizationResult] = None
        self.notification: Optional[Notification] = None

        self._copied_section: Optional[Section] = None
        self._copied_at = 0.0

    # ── Input ───────────────────────────────────────────────────────────────

    @property
    def active_input(self) -> ProfileFormInput:
        if self.view is InputView.URL:
            return self.url_input
        return self.manual_input

    def switch_view(self, view: InputView | str) -> None:
        self.view = InputView(view)
        self._edited()

    def set_url(self, url: str) -> None:
        self.url_input.url = url
        self._edited()

    def set_field(self, field: Literal["headline", "summary"], value: str) -> None:
        if field not in ("headline", "summary"):
            raise ValueError(f"Unknown text field: {field}")
        setattr(self.manual_input, field, value)
        self._edited()

    def set_item(self, field: Literal["experience", "skills"], index: int, value: str) -> None:
        self._items(field)[index] = value
        self._edited()

    def add_item(self, field: Literal["experience", "skills"]) -> None:
        self._items(field).append("")
        self._edited()

    def remove_item(self, field: Literal["experience", "skills"], index: int) -> None:
        items = self._items(field)
        if 0 <= index < len(items):
            items.pop(index)
        if not items:
            items.append("")
        self._edited()

    def _items(self, field: str) -> list[str]:
        if field == "experience":
            return self.manual_input.experience
        if field == "skills":
            return self.manual_input.skills
        raise ValueError(f"Unknown list field: {field}")

    def _edited(self) -> None:
        if self.status in (FormStatus.SUCCESS, FormStatus.FAILED):
            self.status = FormStatus.IDLE

    # ── Submit ──────────────────────────────────────────────────────────────

    def is_valid(self) -> bool:
        return not self.active_input.is_blank()

    def can_submit(self) -> bool:
        return self.is_valid() and self.status is not FormStatus.SUBMITTING

    async def submit(self) -> Optional[OptimizationResult]:
        """Send the active input. Returns the result, or None on failure or when disabled."""
        if not self.can_submit():
            return None

        self.status = FormStatus.SUBMITTING
        self.result = None
        try:
            result = await self.client.analyze(self.active_input.to_payload())
        except OptimizerClientError as e:
            logger.warning(f"Optimize failed: {e.message}")
            self.status = FormStatus.FAILED
            self.notification = Notification(title="Error", description=e.message)
            return None
        except Exception as e:
            logger.error(f"Optimize failed unexpectedly: {e}")
            self.status = FormStatus.FAILED
            self.notification = Notification(title="Error", description=str(e) or ANALYZE_FAILED_MESSAGE)
            return None

        self.result = result
        self.status = FormStatus.SUCCESS
        return result

    # ── Notifications & Copy ────────────────────────────────────────────────

    def dismiss_notification(self) -> None:
        self.notification = None

    @property
    def copied_section(self) -> Optional[Section]:
        """The section copied within the last COPIED_FEEDBACK_SECONDS, if any."""
        if self._copied_section and time.monotonic() - self._copied_at < COPIED_FEEDBACK_SECONDS:
            return self._copied_section
        return None

    def copy_section(self, section: Section | str) -> bool:
        """Copy one result section to the clipboard. Returns True on success."""
        section = Section(section)
        if self.result is None:
            return False

        try:
            self.clipboard.write_text(section_text(self.result, section))
        except (ClipboardError, PermissionError) as e:
            logger.warning(f"Copy of {section.value} failed: {e}")
            self.notification = Notification(title="Error", description="Failed to copy to clipboard")
            return False

        self._copied_section = section
        self._copied_at = time.monotonic()
        self.notification = Notification(title="Success", description="Content copied to clipboard")
        return True


def section_text(result: OptimizationResult, section: Section) -> str:
    """Text placed on the clipboard for a section."""
    if section is Section.KEYWORDS:
        return ", ".join(result.keywords)
    if section is Section.EXPERIENCE:
        return "\n".join(result.experience)
    if section is Section.HEADLINE:
        return result.headline
    return result.summary
