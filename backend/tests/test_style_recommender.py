"""Tests for rule-based style suggestions."""

from __future__ import annotations

import pytest

from stylematch.models.analysis import AnalysisResult
from stylematch.services.style_recommender import FALLBACK_STYLES, suggest_styles


def make_analysis(summary: str, elements=None) -> AnalysisResult:
    return AnalysisResult(
        summary=summary,
        angle="eye-level",
        detected_elements=elements or [],
        photo_type="exterior",
    )


class TestSuggestStyles:
    """Tests for suggest_styles()."""

    def test_missing_elements_pads_with_fallbacks(self) -> None:
        """No matches and no elements yields the first five fallbacks."""
        result = suggest_styles({"summary": "A house."})
        assert result == list(FALLBACK_STYLES[:5])

    def test_classical_rule(self) -> None:
        result = suggest_styles(make_analysis("A temple", ["Doric columns", "pediment"]))
        assert result[:3] == ["Classical Greek", "Neoclassical", "Renaissance"]
        assert len(result) == 5

    def test_singular_column_matches(self) -> None:
        result = suggest_styles(make_analysis("A single column at the entry"))
        assert result[0] == "Classical Greek"

    def test_rules_apply_in_order_and_truncate(self) -> None:
        """Classical and arched rules together exceed five; order is kept."""
        result = suggest_styles(make_analysis("symmetry and vaulted arches"))
        assert result == [
            "Classical Greek",
            "Neoclassical",
            "Renaissance",
            "Roman",
            "Byzantine",
        ]

    def test_duplicate_match_keeps_first_position(self) -> None:
        """Minimalist from the glass rule is not re-added by the fallback list."""
        result = suggest_styles(make_analysis("glass curtain wall"))
        assert result == [
            "International Style",
            "Minimalist",
            "Mid-Century Modern",
            "Art Deco",
            "Postmodern",
        ]

    def test_ornate_rule_then_fallbacks_skip_present(self) -> None:
        result = suggest_styles(make_analysis("elaborate decorative facade"))
        assert result == ["Baroque", "Victorian", "Art Deco", "Minimalist", "Postmodern"]

    def test_material_rules(self) -> None:
        result = suggest_styles(make_analysis("raw concrete with timber and brick"))
        assert result == [
            "Brutalist",
            "Craftsman Bungalow",
            "Arts and Crafts",
            "Colonial Revival",
            "Georgian",
        ]

    def test_case_insensitive(self) -> None:
        result = suggest_styles(make_analysis("BRUTALIST BLOCK"))
        assert result[0] == "Brutalist"

    def test_elements_and_summary_both_considered(self) -> None:
        result = suggest_styles(make_analysis("a quiet house", ["Wood siding"]))
        assert result[:2] == ["Craftsman Bungalow", "Arts and Crafts"]

    @pytest.mark.parametrize(
        "summary,elements",
        [
            ("", []),
            ("columns arches glass ornament concrete wood brick", []),
            ("plain", ["dome", "dome", "Dome"]),
            ("traditional brick", ["natural stone"]),
        ],
    )
    def test_length_and_uniqueness(self, summary: str, elements: list) -> None:
        result = suggest_styles(make_analysis(summary, elements))
        assert 1 <= len(result) <= 5
        assert len(set(result)) == len(result)

    def test_deterministic(self) -> None:
        analysis = make_analysis("a dramatic curved dome", ["glass", "concrete"])
        assert suggest_styles(analysis) == suggest_styles(analysis)

    def test_accepts_mapping_input(self) -> None:
        mapping = {"summary": "Brick row house", "detected_elements": ["Wood door"]}
        assert suggest_styles(mapping) == suggest_styles(
            make_analysis("Brick row house", ["Wood door"])
        )
