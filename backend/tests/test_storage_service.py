"""Tests for the artifact store."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import pytest

from stylematch.errors import ArtifactDownloadError
from stylematch.services.storage_service import ArtifactStore

SOURCE_URL = "https://replicate.delivery/pbxt/abc/out-0.png"
IMAGE_BYTES = b"\x89PNG generated"


class TestFilenames:
    def test_filename_uses_clock_and_slug(self, settings, fixed_clock) -> None:
        store = ArtifactStore(settings, clock=fixed_clock)
        assert store.build_filename("Mid-Century Modern") == "styled_1700000000123_mid-century-modern.png"

    def test_public_url(self, settings, fixed_clock) -> None:
        store = ArtifactStore(settings, clock=fixed_clock)
        assert store.public_url_for("styled_1_gothic.png") == "https://stylematch.test/generated/styled_1_gothic.png"

    def test_public_url_default_base(self, settings) -> None:
        settings.public_base_url = None
        settings.port = 9000
        assert ArtifactStore(settings).public_url_for("a.png") == "http://localhost:9000/generated/a.png"

    def test_distinct_milliseconds_give_distinct_names(self, settings) -> None:
        ticks = iter([1000, 1001])
        store = ArtifactStore(settings, clock=lambda: next(ticks))
        assert store.build_filename("Gothic") != store.build_filename("Gothic")

    def test_same_millisecond_collides(self, settings, fixed_clock) -> None:
        """Known limitation: the name only varies with the timestamp and style."""
        store = ArtifactStore(settings, clock=fixed_clock)
        first = store.save(b"first", "Gothic")
        second = store.save(b"second", "Gothic")
        assert first.local_path == second.local_path
        assert second.local_path.read_bytes() == b"second"


class TestSave:
    def test_creates_directory_and_writes(self, settings, fixed_clock) -> None:
        store = ArtifactStore(settings, clock=fixed_clock)
        assert not Path(settings.output_dir).exists()

        artifact = store.save(IMAGE_BYTES, "Art Deco", source_url=SOURCE_URL)

        assert artifact.local_path == Path(settings.output_dir) / "styled_1700000000123_art-deco.png"
        assert artifact.local_path.read_bytes() == IMAGE_BYTES
        assert artifact.public_url == "https://stylematch.test/generated/styled_1700000000123_art-deco.png"
        assert artifact.source_url == SOURCE_URL


class TestPersist:
    @pytest.mark.asyncio
    async def test_downloads_then_saves(self, settings, fixed_clock, make_client) -> None:
        client = make_client(lambda request: httpx.Response(200, content=IMAGE_BYTES))
        store = ArtifactStore(settings, clock=fixed_clock, http_client=client)

        artifact = await store.persist(SOURCE_URL, "Gothic")

        assert str(client._transport.requests[0].url) == SOURCE_URL
        assert artifact.local_path.read_bytes() == IMAGE_BYTES

    @pytest.mark.asyncio
    async def test_non_2xx_is_fatal(self, settings, fixed_clock, make_client) -> None:
        client = make_client(lambda request: httpx.Response(404))
        store = ArtifactStore(settings, clock=fixed_clock, http_client=client)

        with pytest.raises(ArtifactDownloadError, match="Failed to download generated image: Not Found"):
            await store.persist(SOURCE_URL, "Gothic")
        assert not Path(settings.output_dir).exists()

    @pytest.mark.asyncio
    async def test_transport_error(self, settings, fixed_clock, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("dns failure", request=request)

        store = ArtifactStore(settings, clock=fixed_clock, http_client=make_client(handler))

        with pytest.raises(ArtifactDownloadError):
            await store.persist(SOURCE_URL, "Gothic")

    @pytest.mark.asyncio
    async def test_concurrent_calls_in_distinct_milliseconds(self, settings, make_client) -> None:
        ticks = iter([2000, 2001])
        client = make_client(lambda request: httpx.Response(200, content=IMAGE_BYTES))
        store = ArtifactStore(settings, clock=lambda: next(ticks), http_client=client)

        first, second = await asyncio.gather(
            store.persist(SOURCE_URL, "Gothic"),
            store.persist(SOURCE_URL, "Gothic"),
        )

        assert first.local_path != second.local_path
        assert first.local_path.exists() and second.local_path.exists()
