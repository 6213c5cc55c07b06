"""
Rule-based architectural style suggestions from an image analysis
"""
import re
from typing import Any, List, Mapping, Sequence, Tuple, Union

from stylematch.models.analysis import AnalysisResult

MAX_SUGGESTIONS = 5

# Keyword rules, applied in order; earlier matches keep their position
STYLE_RULES: Sequence[Tuple[re.Pattern, Tuple[str, ...]]] = (
    (re.compile(r"columns?|pediment|entablature|symmetry|classical"),
     ("Classical Greek", "Neoclassical", "Renaissance")),
    (re.compile(r"arches|vault|dome|curved"),
     ("Roman", "Byzantine", "Romanesque", "Gothic")),
    (re.compile(r"glass|curtain|minimal|clean|geometric"),
     ("International Style", "Minimalist", "Mid-Century Modern")),
    (re.compile(r"ornament|decorative|elaborate|curves|dramatic"),
     ("Baroque", "Victorian", "Art Deco")),
    (re.compile(r"concrete|raw|massive|brutalist"),
     ("Brutalist",)),
    (re.compile(r"wood|timber|natural"),
     ("Craftsman Bungalow", "Arts and Crafts")),
    (re.compile(r"brick|traditional"),
     ("Colonial Revival", "Georgian")),
)

FALLBACK_STYLES: Tuple[str, ...] = (
    "Art Deco",
    "Minimalist",
    "Postmodern",
    "Victorian",
    "Tudor Revival",
    "Mediterranean Revival",
    "Prairie School",
    "Contemporary",
)


def _analysis_text(analysis: Union[AnalysisResult, Mapping[str, Any]]) -> str:
    if isinstance(analysis, AnalysisResult):
        elements = analysis.detected_elements
        summary = analysis.summary
    else:
        elements = analysis.get("detected_elements") or []
        summary = analysis.get("summary") or ""
    joined = " ".join(str(element).lower() for element in elements)
    return f"{joined} {str(summary).lower()}"


def suggest_styles(analysis: Union[AnalysisResult, Mapping[str, Any]]) -> List[str]:
    """
    Suggest up to five styles for an analyzed building

    Deterministic for a given summary/elements text: keyword rules first,
    then the fallback list fills the remaining slots.
    """
    combined = _analysis_text(analysis)

    picks: List[str] = []

    def push(style: str) -> None:
        if style not in picks:
            picks.append(style)

    for pattern, styles in STYLE_RULES:
        if pattern.search(combined):
            for style in styles:
                push(style)

    for style in FALLBACK_STYLES:
        if len(picks) >= MAX_SUGGESTIONS:
            break
        push(style)

    return picks[:MAX_SUGGESTIONS]
