"""Tests for delegate worker pools."""

import asyncio
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from gateway.clients import youtube_client
from gateway.clients.delegate_pool import DelegatePool
from gateway.config import settings
from gateway.exceptions import DelegateFailureError
from gateway.services import youtube_service


class TestDelegatePool:
    """Tests for DelegatePool."""

    async def test_runs_call_on_named_worker_thread(self):
        pool = DelegatePool("test", max_workers=1)
        try:
            name = await pool.run(lambda: threading.current_thread().name, timeout=1)
        finally:
            pool.shutdown()

        assert name.startswith("delegate-test")

    async def test_timeout_raises(self):
        pool = DelegatePool("test", max_workers=1)
        try:
            with pytest.raises(asyncio.TimeoutError):
                await pool.run(time.sleep, 0.5, timeout=0.05)
        finally:
            pool.shutdown()

    async def test_shutdown_allows_reuse(self):
        pool = DelegatePool("test", max_workers=1)
        pool.shutdown()

        assert await pool.run(lambda: 42, timeout=1) == 42
        pool.shutdown()


class TestTimedOutExtraction:
    """A timed-out extraction must not block later requests."""

    async def test_fast_call_succeeds_after_slow_call_times_out(self):
        # A single-worker default executor would be held by the slow call
        asyncio.get_running_loop().set_default_executor(ThreadPoolExecutor(max_workers=1))
        release = threading.Event()
        calls = []

        def extract(url):
            calls.append(url)
            if len(calls) == 1:
                release.wait(1)
            return {"title": "fast"}

        with patch("gateway.clients.youtube_client._extract", extract), patch.object(
            settings, "delegate_timeout_seconds", 0.2
        ):
            with pytest.raises(DelegateFailureError):
                await youtube_service.get_video_info("https://youtu.be/slow")
            info = await youtube_service.get_video_info("https://youtu.be/fast")
            on_default = await asyncio.to_thread(lambda: "free")

        release.set()
        assert info.title == "fast"
        assert on_default == "free"
        assert len(calls) == 2

    def test_ydl_socket_timeout_follows_delegate_timeout(self):
        with patch.object(settings, "delegate_timeout_seconds", 12.5):
            assert youtube_client._ydl_options()["socket_timeout"] == 12.5
