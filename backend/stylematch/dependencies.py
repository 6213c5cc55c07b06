"""
Service container wired into the app at creation time
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from stylematch.config import Settings
from stylematch.services.image_transformer import ImageTransformer
from stylematch.services.storage_service import ArtifactStore
from stylematch.services.vision_analyzer import VisionAnalyzer
from stylematch.utils import RandomSource


@dataclass
class StyleMatchServices:
    settings: Settings
    analyzer: VisionAnalyzer
    transformer: ImageTransformer
    store: ArtifactStore

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        random_source: Optional[RandomSource] = None,
    ) -> "StyleMatchServices":
        random_source = random_source or RandomSource()
        return cls(
            settings=settings,
            analyzer=VisionAnalyzer(settings, random_source),
            transformer=ImageTransformer(settings, random_source),
            store=ArtifactStore(settings),
        )


def get_services(request: Request) -> StyleMatchServices:
    return request.app.state.services


def get_app_settings(request: Request) -> Settings:
    return request.app.state.services.settings
