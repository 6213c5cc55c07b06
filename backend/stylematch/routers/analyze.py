"""
Image analysis router
Vision analysis plus rule-based style suggestions
"""
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, File, UploadFile

from stylematch.dependencies import StyleMatchServices, get_services
from stylematch.models.analysis import AnalyzeResponse, ErrorResponse
from stylematch.services.style_recommender import suggest_styles
from stylematch.services.uploads import read_upload

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    image: Optional[UploadFile] = File(None),
    services: StyleMatchServices = Depends(get_services),
):
    """
    Analyze a building photo.

    Input: multipart form-data { image: File }
    Output: { photoType, angle, confidence, detectedElements, suggestedStyles }
    """
    uploaded = await read_upload(image, services.settings.max_upload_bytes)

    validated, confidence = await services.analyzer.analyze(uploaded)
    analysis = validated.analysis

    payload = AnalyzeResponse(
        photoType=analysis.photo_type,
        angle=analysis.angle,
        confidence=confidence,
        detectedElements=list(analysis.detected_elements),
        suggestedStyles=suggest_styles(analysis),
        summary=analysis.summary,
    )
    logger.info("Analysis response ready", suggested_styles=payload.suggestedStyles)
    return payload
