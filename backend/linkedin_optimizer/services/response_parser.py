"""
Response Parser — split the model's plain-text reply into suggestion sections.

The reply is cut on blank lines. Each block is classified by its leading
header token; blocks with no known header are dropped without error, so a
malformed reply degrades to empty fields rather than a failure.
"""

from __future__ import annotations

from enum import Enum

from linkedin_optimizer.models.profile_models import OptimizationResult

SECTION_SEPARATOR = "\n\n"
BULLET = "-"


class SectionKind(str, Enum):
    """Header classification of one reply block."""

    HEADLINE = "HEADLINE:"
    KEYWORDS = "KEYWORDS:"
    EXPERIENCE = "EXPERIENCE:"
    SUMMARY = "SUMMARY:"
    UNKNOWN = ""


# Priority order for prefix matching
_HEADERS = (
    SectionKind.HEADLINE,
    SectionKind.KEYWORDS,
    SectionKind.EXPERIENCE,
    SectionKind.SUMMARY,
)

_LIST_SECTIONS = {SectionKind.KEYWORDS, SectionKind.EXPERIENCE}


# ── Public API ───────────────────────────────────────────────────────────────


def classify_section(section: str) -> tuple[SectionKind, str]:
    """Return the section's kind and its body with the header token removed."""
    trimmed = section.strip()
    for kind in _HEADERS:
        if trimmed.startswith(kind.value):
            return kind, trimmed[len(kind.value):]
    return SectionKind.UNKNOWN, trimmed


def parse_response(raw: str) -> OptimizationResult:
    """Parse a raw model reply into an OptimizationResult.

    Missing sections leave their field empty; a repeated header overwrites
    the earlier one.
    """
    result = OptimizationResult()

    for section in raw.split(SECTION_SEPARATOR):
        kind, body = classify_section(section)
        if kind is SectionKind.UNKNOWN:
            continue
        if kind in _LIST_SECTIONS:
            setattr(result, _field_name(kind), _bullet_items(body))
        else:
            setattr(result, _field_name(kind), body.strip())

    return result


def render_sections(result: OptimizationResult) -> str:
    """Render a result back into the reply format that parse_response reads."""
    blocks = [
        f"{SectionKind.HEADLINE.value}\n{result.headline}",
        f"{SectionKind.KEYWORDS.value}\n" + "\n".join(f"{BULLET} {k}" for k in result.keywords),
        f"{SectionKind.EXPERIENCE.value}\n" + "\n".join(f"{BULLET} {e}" for e in result.experience),
        f"{SectionKind.SUMMARY.value}\n{result.summary}",
    ]
    return SECTION_SEPARATOR.join(blocks)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _field_name(kind: SectionKind) -> str:
    return kind.name.lower()


def _bullet_items(body: str) -> list[str]:
    """Keep dash-led lines, minus their leading dash."""
    items = []
    for line in body.split("\n"):
        stripped = line.strip()
        if stripped.startswith(BULLET):
            items.append(stripped[len(BULLET):].strip())
    return items
