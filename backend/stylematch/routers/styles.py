"""
Style catalog router
"""
from fastapi import APIRouter

from stylematch.models.style import (
    STYLE_CATALOG,
    CatalogStyle,
    StyleCatalogResponse,
    StylePeriod,
    group_by_period,
)
from stylematch.services.prompts import STYLE_PROMPTS

router = APIRouter()


@router.get("/styles", response_model=StyleCatalogResponse)
async def list_styles():
    """All selectable architectural styles, grouped by period"""
    periods = [
        StylePeriod(
            period=period,
            styles=[
                CatalogStyle(**style.model_dump(), hasPromptTemplate=style.name in STYLE_PROMPTS)
                for style in styles
            ],
        )
        for period, styles in group_by_period(STYLE_CATALOG).items()
    ]
    return StyleCatalogResponse(total=len(STYLE_CATALOG), periods=periods)
