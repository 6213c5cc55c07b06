"""
Vision Analyzer
Describes an uploaded building photo via OpenAI chat completions (vision)
"""
import json
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

import httpx
import structlog

from stylematch.config import Settings
from stylematch.errors import AnalysisError, ServiceNotConfiguredError
from stylematch.models.analysis import (
    CAMERA_ANGLES,
    DEFAULT_ANGLE,
    DEFAULT_PHOTO_TYPE,
    PHOTO_TYPES,
    AnalysisResult,
    UploadedImage,
    ValidatedAnalysis,
)
from stylematch.services.prompts import ANALYSIS_PROMPT
from stylematch.utils import RandomSource

logger = structlog.get_logger(__name__)

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*\n?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\n?```\s*$")


def _normalize_angle(value: str) -> str:
    return re.sub(r"[\s_]+", "-", value.strip().lower())


def validate_analysis(payload: Any) -> ValidatedAnalysis:
    """
    Validate a parsed model response, defaulting the lenient fields

    summary and angle must be strings; everything else falls back to a
    default and is reported in ``defaulted_fields``.
    """
    if not isinstance(payload, dict):
        raise AnalysisError("Analysis response must be a JSON object")

    summary = payload.get("summary")
    if not isinstance(summary, str):
        raise AnalysisError("Analysis response is missing a string 'summary'")

    raw_angle = payload.get("angle")
    if not isinstance(raw_angle, str):
        raise AnalysisError("Analysis response is missing a string 'angle'")

    defaulted: List[str] = []

    angle = _normalize_angle(raw_angle)
    if angle not in CAMERA_ANGLES:
        angle = DEFAULT_ANGLE
        defaulted.append("angle")

    elements = payload.get("detected_elements")
    if elements is None:
        elements = []
        defaulted.append("detected_elements")
    elif isinstance(elements, list):
        kept = [element for element in elements if isinstance(element, str)]
        if len(kept) != len(elements):
            defaulted.append("detected_elements")
        elements = kept
    else:
        raise AnalysisError("'detected_elements' must be an array of strings")

    photo_type = payload.get("photoType")
    if photo_type not in PHOTO_TYPES:
        photo_type = DEFAULT_PHOTO_TYPE
        defaulted.append("photoType")

    analysis = AnalysisResult(
        summary=summary,
        angle=angle,
        detected_elements=elements,
        photo_type=photo_type,
    )
    return ValidatedAnalysis(analysis=analysis, defaulted_fields=defaulted)


def parse_analysis(raw_text: str) -> ValidatedAnalysis:
    """Parse the model's text content (optionally fenced) into an analysis"""
    cleaned = _FENCE_OPEN.sub("", raw_text.strip())
    cleaned = _FENCE_CLOSE.sub("", cleaned).strip()
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise AnalysisError(f"Analysis response was not valid JSON: {e}") from e
    return validate_analysis(payload)


class VisionAnalyzer:
    """Sends an image and the analysis prompt to a multimodal chat model"""

    def __init__(
        self,
        settings: Settings,
        random_source: RandomSource,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings
        self._random = random_source
        self._http_client = http_client

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=120.0) as client:
            yield client

    def build_payload(self, image: UploadedImage) -> Dict[str, Any]:
        return {
            "model": self._settings.openai_model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": ANALYSIS_PROMPT},
                        {"type": "image_url", "image_url": {"url": image.to_data_url()}},
                    ],
                }
            ],
            "temperature": self._settings.analysis_temperature,
            "response_format": {"type": "json_object"},
        }

    async def _complete(self, payload: Dict[str, Any]) -> str:
        headers = {
            "Authorization": f"Bearer {self._settings.openai_api_key}",
            "Content-Type": "application/json",
        }
        url = f"{self._settings.openai_base_url.rstrip('/')}/chat/completions"

        try:
            async with self._client() as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise AnalysisError(f"OpenAI request failed: {e}") from e

        if not response.is_success:
            if response.status_code == 401:
                raise AnalysisError("OpenAI API key is invalid or expired")
            if response.status_code == 429:
                raise AnalysisError("OpenAI rate limit exceeded. Please try again later")
            raise AnalysisError(f"OpenAI API error ({response.status_code}): {response.text}")

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AnalysisError("OpenAI returned an unexpected response format") from e

        return content or "{}"

    async def analyze(self, image: UploadedImage) -> Tuple[ValidatedAnalysis, float]:
        """
        Analyze an uploaded image

        Returns:
            The validated analysis and a cosmetic confidence score
        """
        if not self._settings.is_openai_configured:
            raise ServiceNotConfiguredError("OPENAI_API_KEY is not configured")

        logger.info(
            "Analyzing image with OpenAI vision",
            model=self._settings.openai_model,
            mime_type=image.mime_type,
            size_bytes=len(image.data),
        )
        raw = await self._complete(self.build_payload(image))
        logger.debug("OpenAI analysis response", raw=raw)

        validated = parse_analysis(raw)
        if not validated.is_valid:
            logger.warning("Analysis fields defaulted", fields=validated.defaulted_fields)

        confidence = self._random.confidence()
        logger.info(
            "Analysis complete",
            photo_type=validated.analysis.photo_type,
            angle=validated.analysis.angle,
            elements=len(validated.analysis.detected_elements),
        )
        return validated, confidence
