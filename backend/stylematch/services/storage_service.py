"""
Storage Service
Downloads generated images and stores them in the local output directory
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable, Optional

import httpx
import structlog

from stylematch.config import Settings
from stylematch.errors import ArtifactDownloadError
from stylematch.models.analysis import GeneratedArtifact
from stylematch.utils import epoch_millis, slugify

logger = structlog.get_logger(__name__)

GENERATED_MOUNT = "/generated"


class ArtifactStore:
    """
    Local, filesystem-backed store for generated images.

    Files are named ``styled_<epoch-ms>_<style-slug>.png`` and are never
    cleaned up. Two saves for the same style within the same millisecond
    resolve to the same name and the later write wins.
    """

    def __init__(
        self,
        settings: Settings,
        clock: Callable[[], int] = epoch_millis,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings
        self._clock = clock
        self._http_client = http_client

    @property
    def output_dir(self) -> Path:
        return self._settings.output_path

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=60.0, follow_redirects=True) as client:
            yield client

    def build_filename(self, style_name: str) -> str:
        return f"styled_{self._clock()}_{slugify(style_name)}.png"

    def public_url_for(self, filename: str) -> str:
        return f"{self._settings.public_url}{GENERATED_MOUNT}/{filename}"

    async def download(self, url: str) -> bytes:
        """
        Fetch generated image bytes

        Raises:
            ArtifactDownloadError: on a non-2xx response or transport failure
        """
        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            raise ArtifactDownloadError(f"Failed to download generated image: {e}") from e

        if not response.is_success:
            reason = response.reason_phrase or str(response.status_code)
            raise ArtifactDownloadError(f"Failed to download generated image: {reason}")

        return response.content

    def save(self, data: bytes, style_name: str, source_url: str = "") -> GeneratedArtifact:
        """Write image bytes to the output directory"""
        self.output_dir.mkdir(parents=True, exist_ok=True)

        filename = self.build_filename(style_name)
        path = self.output_dir / filename
        path.write_bytes(data)

        artifact = GeneratedArtifact(
            source_url=source_url,
            local_path=path,
            public_url=self.public_url_for(filename),
        )
        logger.info("Image saved locally", path=str(path), url=artifact.public_url, size_bytes=len(data))
        return artifact

    async def persist(self, source_url: str, style_name: str) -> GeneratedArtifact:
        """Download a generated image and store it under a fresh filename"""
        data = await self.download(source_url)
        return self.save(data, style_name, source_url=source_url)
