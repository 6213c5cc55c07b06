"""
Style match router
Transforms an uploaded building photo into a chosen architectural style
"""
import json
from typing import Any, Dict, Optional

import structlog
from fastapi import APIRouter, Depends, File, Form, UploadFile

from stylematch.dependencies import StyleMatchServices, get_services
from stylematch.errors import InvalidUploadError
from stylematch.models.analysis import ErrorResponse, StyleMatchResponse, TransformationRequest
from stylematch.services.prompts import build_style_prompt
from stylematch.services.uploads import read_upload

router = APIRouter()
logger = structlog.get_logger(__name__)


def parse_analysis_field(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """The analysis echoed back by the client is opaque; only its summary is read"""
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        raise InvalidUploadError("Invalid analysis JSON")
    return parsed if isinstance(parsed, dict) else None


@router.post(
    "/style-match",
    response_model=StyleMatchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def style_match(
    image: Optional[UploadFile] = File(None),
    styleName: Optional[str] = Form(None),
    analysis: Optional[str] = Form(None),
    services: StyleMatchServices = Depends(get_services),
):
    """
    Generate a style-transformed version of an image.

    Input: multipart form-data { image: File, styleName: string, analysis?: JSON string }
    Output: { outputUrl: string }
    """
    uploaded = await read_upload(image, services.settings.max_upload_bytes)

    style_name = (styleName or "").strip()
    if not style_name:
        raise InvalidUploadError("Missing styleName parameter")

    request = TransformationRequest(
        image=uploaded,
        style_name=style_name,
        analysis=parse_analysis_field(analysis),
    )

    logger.info("Generating style transformation", style=request.style_name)
    prompt = build_style_prompt(request.style_name, request.analysis)
    logger.info("Using prompt", prompt=prompt)

    source_url = await services.transformer.transform(request.image, prompt)
    artifact = await services.store.persist(source_url, request.style_name)

    return StyleMatchResponse(outputUrl=artifact.public_url)
