"""Pytest fixtures for style match tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List

import httpx
import pytest

from stylematch.config import Settings
from stylematch.models.analysis import UploadedImage
from stylematch.utils import RandomSource

# Smallest valid PNG header plus a few bytes; never decoded by the pipeline
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class FixedRandom(RandomSource):
    """Random source pinned to known values."""

    def __init__(self, confidence: float = 0.9, seed: int = 424242):
        super().__init__(seed=0)
        self._confidence = confidence
        self._seed = seed

    def confidence(self) -> float:
        return self._confidence

    def seed(self) -> int:
        return self._seed


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with both credentials configured and a temp output directory."""
    return Settings(
        openai_api_key="sk-test",
        replicate_api_token="r8-test",
        public_base_url="https://stylematch.test",
        output_dir=str(tmp_path / "generated"),
        replicate_poll_interval=0.0,
        node_env="development",
        _env_file=None,
    )


@pytest.fixture
def fixed_random() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    return lambda: 1700000000123


@pytest.fixture
def png_image() -> UploadedImage:
    return UploadedImage(data=PNG_BYTES, mime_type="image/png", filename="house.png")


def openai_completion(content: str) -> Dict:
    """Chat completion body carrying the given message content."""
    return {
        "id": "chatcmpl-test",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


def openai_json_completion(payload: Dict) -> Dict:
    return openai_completion(json.dumps(payload))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient routed through a RecordingTransport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=RecordingTransport(handler))

    return factory
