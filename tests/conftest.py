"""Test configuration and fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from gateway.dependencies import get_key_store
from gateway.main import app
from gateway.services.key_store import KeyStore

SAMPLE_VIDEO_INFO = {
    "id": "dQw4w9WgXcQ",
    "title": "Never Gonna Give You Up",
    "uploader": "Rick Astley",
    "description": "The official video",
    "duration": 212,
    "view_count": 1500000000,
    "upload_date": "20091025",
    "formats": [
        {
            "format_id": "18",
            "url": "https://rr1.googlevideo.com/videoplayback?itag=18",
            "ext": "mp4",
            "vcodec": "avc1.42001E",
            "acodec": "mp4a.40.2",
            "format_note": "360p",
            "tbr": 503.5,
            "width": 640,
            "height": 360,
            "fps": 25,
        },
        {
            "format_id": "140",
            "url": "https://rr1.googlevideo.com/videoplayback?itag=140",
            "ext": "m4a",
            "vcodec": "none",
            "acodec": "mp4a.40.2",
            "format_note": "medium",
            "tbr": 129.5,
        },
    ],
    "thumbnails": [
        {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg", "width": 480, "height": 360},
        {"id": "no-url"},
    ],
}


@pytest.fixture
def key_store() -> KeyStore:
    """Fresh key store seeded with the default test key."""
    return KeyStore(["APIKEY"])


@pytest.fixture
async def mock_youtube():
    """Mock yt-dlp extraction so tests never touch the network."""
    mock_extract = AsyncMock(return_value=SAMPLE_VIDEO_INFO)
    with patch("gateway.clients.youtube_client.extract_info", mock_extract):
        yield mock_extract


@pytest.fixture
async def client(key_store: KeyStore, mock_youtube) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with an isolated key store and mocked delegates.

    Patches the keep-alive start/stop functions in gateway.main (where they are
    imported) so a lifespan run never starts a background task.
    """
    app.dependency_overrides[get_key_store] = lambda: key_store
    with patch(
        "gateway.main.start_keep_alive", new=AsyncMock(return_value=None)
    ), patch(
        "gateway.main.stop_keep_alive", new=AsyncMock()
    ):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    app.dependency_overrides.clear()
