"""
Pydantic models for image analysis and style transformation
"""
import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


PhotoType = Literal["interior", "exterior"]
CameraAngle = Literal["above", "below", "eye-level"]

PHOTO_TYPES = ("interior", "exterior")
CAMERA_ANGLES = ("above", "below", "eye-level")
DEFAULT_PHOTO_TYPE: PhotoType = "exterior"
DEFAULT_ANGLE: CameraAngle = "eye-level"


# ============ Pipeline Records ============

@dataclass(frozen=True)
class UploadedImage:
    """An uploaded image held in memory for the lifetime of one request"""
    data: bytes
    mime_type: str
    filename: Optional[str] = None

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode()
        return f"data:{self.mime_type};base64,{encoded}"


class AnalysisResult(BaseModel):
    """Normalized output of the vision analyzer"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str
    angle: CameraAngle
    detected_elements: List[str] = Field(default_factory=list)
    photo_type: PhotoType = Field(DEFAULT_PHOTO_TYPE, alias="photoType")


class ValidatedAnalysis(BaseModel):
    """Analysis plus the fields that had to be defaulted during validation"""
    analysis: AnalysisResult
    defaulted_fields: List[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.defaulted_fields


@dataclass
class TransformationRequest:
    """One style-match request: the image, the chosen style, optional prior analysis"""
    image: UploadedImage
    style_name: str
    analysis: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class GeneratedArtifact:
    """A generated image stored in the output directory"""
    source_url: str
    local_path: Path
    public_url: str


# ============ Response Models ============

class AnalyzeResponse(BaseModel):
    """Response for POST /api/analyze"""
    photoType: PhotoType
    angle: CameraAngle
    confidence: float
    detectedElements: List[str]
    suggestedStyles: List[str]
    summary: Optional[str] = None


class StyleMatchResponse(BaseModel):
    """Response for POST /api/style-match"""
    outputUrl: str


class ServiceStatus(BaseModel):
    openai: bool
    replicate: bool


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str
    services: ServiceStatus


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
