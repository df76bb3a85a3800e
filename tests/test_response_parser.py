"""Tests for splitting model replies into suggestion sections."""

from linkedin_optimizer.models.profile_models import OptimizationResult
from linkedin_optimizer.services.response_parser import (
    SectionKind,
    classify_section,
    parse_response,
    render_sections,
)

WELL_FORMED_REPLY = (
    "HEADLINE:\nSenior Engineer\n\n"
    "KEYWORDS:\n- Leadership\n- Python\n\n"
    "EXPERIENCE:\n- Led team of 5\n\n"
    "SUMMARY:\nResults-driven engineer."
)


class TestClassifySection:
    """Header classification of single blocks."""

    def test_known_headers(self) -> None:
        assert classify_section("HEADLINE:\nX") == (SectionKind.HEADLINE, "\nX")
        assert classify_section("  KEYWORDS:\n- a")[0] is SectionKind.KEYWORDS
        assert classify_section("\nEXPERIENCE:")[0] is SectionKind.EXPERIENCE
        assert classify_section("SUMMARY: done")[0] is SectionKind.SUMMARY

    def test_header_must_lead_the_block(self) -> None:
        kind, body = classify_section("Here is your HEADLINE: something")
        assert kind is SectionKind.UNKNOWN
        assert body == "Here is your HEADLINE: something"

    def test_headers_are_case_sensitive(self) -> None:
        assert classify_section("Headline:\nX")[0] is SectionKind.UNKNOWN


class TestParseResponse:
    """End-to-end parsing of raw replies."""

    def test_well_formed_reply(self) -> None:
        result = parse_response(WELL_FORMED_REPLY)

        assert result == OptimizationResult(
            headline="Senior Engineer",
            keywords=["Leadership", "Python"],
            experience=["Led team of 5"],
            summary="Results-driven engineer.",
        )

    def test_empty_reply_gives_empty_result(self) -> None:
        result = parse_response("")

        assert result.headline == ""
        assert result.keywords == []
        assert result.experience == []
        assert result.summary == ""

    def test_missing_keywords_section(self) -> None:
        raw = "HEADLINE:\nSenior Engineer\n\nSUMMARY:\nShort summary."

        result = parse_response(raw)

        assert result.keywords == []
        assert result.headline == "Senior Engineer"
        assert result.summary == "Short summary."

    def test_duplicate_header_keeps_last(self) -> None:
        raw = "HEADLINE:\nFirst\n\nHEADLINE:\nSecond"

        assert parse_response(raw).headline == "Second"

    def test_unknown_sections_are_dropped(self) -> None:
        raw = "Sure! Here are my suggestions.\n\n" + WELL_FORMED_REPLY + "\n\nGood luck!"

        result = parse_response(raw)

        assert result.headline == "Senior Engineer"
        assert result.summary == "Results-driven engineer."

    def test_list_keeps_only_dash_lines(self) -> None:
        raw = "KEYWORDS:\nTop picks:\n  - Cloud\n* Ignored\n-Kubernetes\n- Cross-functional"

        result = parse_response(raw)

        assert result.keywords == ["Cloud", "Kubernetes", "Cross-functional"]

    def test_scalar_on_header_line(self) -> None:
        result = parse_response("HEADLINE: Staff Engineer | Platform\n\nSUMMARY:   Builds things.  ")

        assert result.headline == "Staff Engineer | Platform"
        assert result.summary == "Builds things."

    def test_multiline_summary_is_kept(self) -> None:
        result = parse_response("SUMMARY:\nLine one.\nLine two.")

        assert result.summary == "Line one.\nLine two."

    def test_no_count_validation(self) -> None:
        raw = "EXPERIENCE:\n" + "\n".join(f"- point {i}" for i in range(7))

        assert len(parse_response(raw).experience) == 7


class TestRenderSections:
    """Rendering a result back into reply text."""

    def test_reparse_gives_same_result(self) -> None:
        original = parse_response(WELL_FORMED_REPLY)

        assert parse_response(render_sections(original)) == original

    def test_reparse_with_empty_fields(self) -> None:
        original = OptimizationResult(headline="Only headline")

        assert parse_response(render_sections(original)) == original

    def test_rendered_layout(self) -> None:
        text = render_sections(parse_response(WELL_FORMED_REPLY))

        assert text.startswith("HEADLINE:\nSenior Engineer\n\nKEYWORDS:\n- Leadership\n- Python")
        assert text.endswith("SUMMARY:\nResults-driven engineer.")
