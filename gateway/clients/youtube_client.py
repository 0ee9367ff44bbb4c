"""YouTube metadata extractor backed by yt-dlp."""

import logging

from yt_dlp import YoutubeDL

from gateway.clients.delegate_pool import DelegatePool
from gateway.config import settings

logger = logging.getLogger(__name__)

pool = DelegatePool("youtube", settings.delegate_max_workers)


def _ydl_options() -> dict:
    return {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        "noplaylist": True,
        # Bounds every network read so a stalled extraction frees its worker
        "socket_timeout": settings.delegate_timeout_seconds,
    }


def _extract(url: str) -> dict:
    with YoutubeDL(_ydl_options()) as ydl:
        info = ydl.extract_info(url, download=False)
        return ydl.sanitize_info(info)


async def extract_info(url: str, timeout: float) -> dict:
    """Fetch metadata for a YouTube video without downloading it.

    Extraction runs on the YouTube delegate pool.

    Args:
        url: YouTube video link
        timeout: Seconds to wait for yt-dlp

    Returns:
        yt-dlp info dict (title, uploader, formats, thumbnails, ...)

    Raises:
        TimeoutError: If extraction takes longer than timeout
        yt_dlp.utils.DownloadError: If yt-dlp cannot extract the video
    """
    info = await pool.run(_extract, url, timeout=timeout)
    logger.info("Fetched video info for %s from YouTube", url)
    return info
