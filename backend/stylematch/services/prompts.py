"""
Prompts for vision analysis and style transformation
"""
from typing import Any, Mapping, Optional, Union

from stylematch.models.analysis import AnalysisResult


# Vision analysis instruction, sent alongside the uploaded image
ANALYSIS_PROMPT = """You are an architectural photo analyst.
Analyze this image and provide:
1. Photo type (interior or exterior)
2. Camera angle (above, below, or eye-level)
3. List 6-10 architectural elements present (materials, facade, columns, arches, roofline, glazing, ornament, etc)
4. Brief summary of the architectural character

Return strict JSON with keys:
- summary (string): brief description
- angle (string): "above", "below", or "eye-level"
- detected_elements (array of strings): architectural elements
- photoType (string): "interior" or "exterior\""""


# Transformation descriptions for styles with a dedicated template
STYLE_PROMPTS = {
    "Classical Greek": "Ancient Greek architecture with Doric, Ionic, or Corinthian columns, pediments, entablature, marble materials, symmetrical proportions",
    "Roman": "Roman architecture with arches, domes, concrete construction, aqueducts, amphitheater elements, classical orders",
    "Gothic": "Gothic architecture with pointed arches, flying buttresses, ribbed vaults, tall spires, large windows, stone tracery",
    "Renaissance": "Renaissance architecture with classical proportions, symmetry, domes, pilasters, rusticated stonework, harmonious design",
    "Baroque": "Baroque architecture with dramatic curves, ornate decoration, gilded details, dynamic movement, theatrical grandeur",
    "Victorian": "Victorian architecture with ornate details, bay windows, decorative trim, asymmetrical facades, mixed materials",
    "Art Deco": "Art Deco architecture with geometric patterns, vertical emphasis, metallic accents, stylized ornamentation, luxury materials",
    "Mid-Century Modern": "Mid-century modern architecture with clean lines, large windows, flat roofs, natural materials, integration with landscape",
    "Brutalist": "Brutalist architecture with raw concrete, massive geometric forms, repetitive angular elements, fortress-like appearance",
    "International Style": "International style architecture with glass curtain walls, steel frame, minimal ornamentation, functional design",
    "Minimalist": "Minimalist architecture with simple geometric forms, clean lines, neutral colors, unadorned surfaces, emphasis on space and light",
}


def describe_style(style_name: str) -> str:
    """Transformation description for a style, generic for unknown names"""
    return STYLE_PROMPTS.get(
        style_name,
        f"{style_name} architectural style with appropriate period-correct details and materials",
    )


def _summary_of(analysis: Union[AnalysisResult, Mapping[str, Any], None]) -> Optional[str]:
    if analysis is None:
        return None
    if isinstance(analysis, AnalysisResult):
        summary = analysis.summary
    elif isinstance(analysis, Mapping):
        summary = analysis.get("summary")
    else:
        return None
    return summary if isinstance(summary, str) and summary else None


def build_style_prompt(
    style_name: str,
    analysis: Union[AnalysisResult, Mapping[str, Any], None] = None,
) -> str:
    """
    Build the image-to-image instruction for a style

    Segment order is fixed; the building context line only appears when a
    prior analysis with a summary is supplied.
    """
    summary = _summary_of(analysis)
    segments = [
        f"Transform this building into {describe_style(style_name)}.",
        "Preserve the original building structure, massing, and proportions.",
        "Maintain the camera angle and perspective.",
        "Focus on changing facade materials, architectural details, and ornamental elements.",
        "Keep the surrounding context and landscape unchanged.",
        f"Original building context: {summary}" if summary else "",
        "Ensure architectural accuracy and historical authenticity for the chosen style.",
        "High quality architectural rendering, professional photography style.",
    ]
    return " ".join(segment for segment in segments if segment)
