"""
Architectural style catalog offered to clients
"""
from typing import Dict, List

from pydantic import BaseModel


class ArchitecturalStyle(BaseModel):
    name: str
    period: str
    description: str


class CatalogStyle(ArchitecturalStyle):
    hasPromptTemplate: bool = False


class StylePeriod(BaseModel):
    period: str
    styles: List[CatalogStyle]


class StyleCatalogResponse(BaseModel):
    """Response for GET /api/styles"""
    total: int
    periods: List[StylePeriod]


def _style(name: str, period: str, description: str) -> ArchitecturalStyle:
    return ArchitecturalStyle(name=name, period=period, description=description)


STYLE_CATALOG: List[ArchitecturalStyle] = [
    # Classical & Ancient
    _style("Classical Greek", "Ancient", "Columns, pediments, symmetry"),
    _style("Roman", "Ancient", "Arches, domes, concrete construction"),
    _style("Byzantine", "Medieval", "Domes, mosaics, religious motifs"),

    # Medieval
    _style("Romanesque", "Medieval", "Thick walls, round arches, small windows"),
    _style("Gothic", "Medieval", "Pointed arches, flying buttresses, tall spires"),
    _style("Norman", "Medieval", "Massive construction, round arches"),

    # Renaissance & Baroque
    _style("Renaissance", "Renaissance", "Classical proportions, symmetry, humanism"),
    _style("Baroque", "Baroque", "Ornate decoration, dramatic curves, grandeur"),
    _style("Rococo", "Baroque", "Delicate ornamentation, pastel colors, asymmetry"),
    _style("Neoclassical", "Neoclassical", "Greek and Roman revival, clean lines"),

    # 19th Century
    _style("Victorian", "19th Century", "Ornate details, bay windows, turrets"),
    _style("Gothic Revival", "19th Century", "Medieval Gothic elements, pointed arches"),
    _style("Second Empire", "19th Century", "Mansard roofs, dormer windows"),
    _style("Queen Anne", "19th Century", "Asymmetrical facades, decorative elements"),
    _style("Shingle Style", "19th Century", "Wood shingles, informal massing"),
    _style("Richardsonian Romanesque", "19th Century", "Heavy stone, round arches"),

    # Early 20th Century
    _style("Art Nouveau", "Early 20th Century", "Organic forms, flowing lines, nature motifs"),
    _style("Arts and Crafts", "Early 20th Century", "Handcrafted details, natural materials"),
    _style("Prairie School", "Early 20th Century", "Horizontal lines, flat roofs, Frank Lloyd Wright"),
    _style("Art Deco", "Early 20th Century", "Geometric patterns, vertical emphasis, luxury"),
    _style("Bauhaus", "Early 20th Century", "Functional design, minimal ornamentation"),

    # Modern
    _style("International Style", "Modern", "Glass curtain walls, minimal decoration"),
    _style("Mid-Century Modern", "Modern", "Clean lines, large windows, integration with nature"),
    _style("Brutalist", "Modern", "Raw concrete, massive forms, fortress-like"),
    _style("Postmodern", "Postmodern", "Eclectic mix, historical references, irony"),

    # Contemporary
    _style("Deconstructivism", "Contemporary", "Fragmented forms, non-rectilinear shapes"),
    _style("High-Tech", "Contemporary", "Exposed structure, industrial materials"),
    _style("Minimalist", "Contemporary", "Simple forms, clean lines, minimal elements"),
    _style("Sustainable/Green", "Contemporary", "Eco-friendly materials, energy efficiency"),
    _style("Parametric", "Contemporary", "Computer-generated forms, complex geometry"),

    # Regional & Cultural
    _style("Colonial American", "Colonial", "Symmetrical facade, central door, shutters"),
    _style("Federal", "Colonial", "Refined proportions, decorative elements"),
    _style("Georgian", "Colonial", "Formal symmetry, classical details"),
    _style("Spanish Colonial", "Colonial", "Stucco walls, red tile roofs, courtyards"),
    _style("Mission Revival", "Revival", "Spanish mission influence, bell towers"),
    _style("Mediterranean Revival", "Revival", "Stucco, tile roofs, arched openings"),
    _style("Tudor Revival", "Revival", "Half-timbering, steep roofs, medieval English"),
    _style("Colonial Revival", "Revival", "American colonial elements, symmetry"),

    # Asian Styles
    _style("Traditional Japanese", "Traditional", "Wood construction, sliding doors, gardens"),
    _style("Chinese Traditional", "Traditional", "Curved roofs, bright colors, feng shui"),
    _style("Islamic", "Traditional", "Geometric patterns, arches, minarets"),
    _style("Indian Traditional", "Traditional", "Intricate carvings, courtyards, domes"),

    # Vernacular
    _style("Craftsman Bungalow", "Vernacular", "Low-pitched roofs, exposed rafters, porches"),
    _style("Ranch Style", "Vernacular", "Single-story, long and low, attached garage"),
    _style("Cape Cod", "Vernacular", "Steep roofs, central chimney, dormers"),
    _style("Farmhouse", "Vernacular", "Simple forms, functional design, porches"),
    _style("Log Cabin", "Vernacular", "Log construction, rustic appearance"),
    _style("Adobe", "Vernacular", "Thick walls, flat roofs, southwestern US"),
]


def group_by_period(styles: List[ArchitecturalStyle]) -> Dict[str, List[ArchitecturalStyle]]:
    """Group styles by period, keeping first-seen period order"""
    grouped: Dict[str, List[ArchitecturalStyle]] = {}
    for style in styles:
        grouped.setdefault(style.period, []).append(style)
    return grouped
