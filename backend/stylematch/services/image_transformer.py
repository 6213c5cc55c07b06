"""
Image Transformer
Runs image-to-image generation on Replicate (FLUX dev)
"""
import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx
import structlog

from stylematch.config import Settings
from stylematch.errors import GenerationError, ServiceNotConfiguredError
from stylematch.models.analysis import UploadedImage
from stylematch.utils import RandomSource

logger = structlog.get_logger(__name__)

GENERATION_PARAMS = {
    "strength": 0.75,
    "guidance": 4.5,
    "num_inference_steps": 28,
}

TERMINAL_STATUSES = ("succeeded", "failed", "canceled")


def extract_output_url(output: Any) -> str:
    """Replicate returns a single URL or a list of URLs; take the first"""
    if isinstance(output, list):
        output = output[0] if output else None
    if not output or not isinstance(output, str):
        raise GenerationError("No image generated from Replicate")
    return output


class ImageTransformer:
    """Submits the original image plus a style prompt to Replicate"""

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

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.replicate_api_token}",
            "Content-Type": "application/json",
        }

    def build_input(self, image: UploadedImage, prompt: str) -> Dict[str, Any]:
        return {
            "prompt": prompt,
            "image": image.to_data_url(),
            **GENERATION_PARAMS,
            "seed": self._random.seed(),
        }

    async def _create_prediction(self, client: httpx.AsyncClient, model_input: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self._settings.replicate_base_url.rstrip('/')}/models/{self._settings.replicate_model}/predictions"
        response = await client.post(
            url,
            json={"input": model_input},
            headers={**self._headers, "Prefer": "wait"},
        )

        if not response.is_success:
            if response.status_code == 401:
                raise GenerationError("Replicate API token is invalid or missing")
            if response.status_code == 402:
                raise GenerationError("Replicate account has insufficient credits")
            if response.status_code == 429:
                raise GenerationError("Replicate rate limit exceeded. Please try again later")
            raise GenerationError(f"Replicate API error ({response.status_code}): {response.text}")

        return response.json()

    async def _wait_for(self, client: httpx.AsyncClient, prediction: Dict[str, Any]) -> Dict[str, Any]:
        while prediction.get("status") not in TERMINAL_STATUSES:
            get_url = (prediction.get("urls") or {}).get("get")
            if not get_url:
                raise GenerationError("Replicate API returned unexpected response format")

            await asyncio.sleep(self._settings.replicate_poll_interval)
            response = await client.get(get_url, headers=self._headers)
            if not response.is_success:
                raise GenerationError(f"Replicate status check failed ({response.status_code}): {response.text}")
            prediction = response.json()

        return prediction

    async def transform(self, image: UploadedImage, prompt: str) -> str:
        """
        Generate a style-transformed version of an image

        Returns:
            URL of the generated image on Replicate's delivery host
        """
        if not self._settings.is_replicate_configured:
            raise ServiceNotConfiguredError("REPLICATE_API_TOKEN is not configured")

        model_input = self.build_input(image, prompt)
        logger.info(
            "Starting image transformation",
            model=self._settings.replicate_model,
            seed=model_input["seed"],
        )

        try:
            async with self._client() as client:
                prediction = await self._create_prediction(client, model_input)
                prediction = await self._wait_for(client, prediction)
        except httpx.HTTPError as e:
            raise GenerationError(f"Replicate request failed: {e}") from e

        status = prediction.get("status")
        if status != "succeeded":
            error = prediction.get("error") or "Unknown error"
            raise GenerationError(f"Replicate prediction {status}: {error}")

        image_url = extract_output_url(prediction.get("output"))
        logger.info("Generated image URL", url=image_url, prediction_id=prediction.get("id"))
        return image_url
