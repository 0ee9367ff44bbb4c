"""Business logic for YouTube video metadata lookup."""

import asyncio
import logging
from datetime import date, datetime

from yt_dlp.utils import DownloadError

from gateway.clients import youtube_client
from gateway.config import settings
from gateway.exceptions import DelegateFailureError, InvalidExternalLinkError
from gateway.models.schemas import Thumbnail, VideoFormat, VideoInfoResponse

logger = logging.getLogger(__name__)

SUPPORTED_HOSTS = ("youtube.com", "youtu.be")
FETCH_FAILED_MESSAGE = "failed to fetch video info"


def _is_youtube_link(url: str) -> bool:
    """Check if url mentions one of the supported YouTube hosts.

    Args:
        url: Link supplied by the client

    Returns:
        True if url contains youtube.com or youtu.be
    """
    return any(host in url for host in SUPPORTED_HOSTS)


def _parse_upload_date(value: str | None) -> date | None:
    """Parse the YYYYMMDD upload date reported by yt-dlp."""
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y%m%d").date()
    except ValueError:
        logger.warning("Unexpected upload date format: %s", value)
        return None


def _mime_type(fmt: dict) -> str | None:
    ext = fmt.get("ext")
    if not ext:
        return None
    if fmt.get("vcodec") not in (None, "none"):
        return f"video/{ext}"
    if fmt.get("acodec") not in (None, "none"):
        return f"audio/{ext}"
    return None


def _to_format(fmt: dict) -> VideoFormat:
    # yt-dlp reports total bitrate in kbit/s
    tbr = fmt.get("tbr")
    return VideoFormat(
        itag=str(fmt.get("format_id", "")),
        url=fmt.get("url"),
        mime_type=_mime_type(fmt),
        quality=fmt.get("format_note") or fmt.get("resolution"),
        bitrate=round(tbr * 1000) if tbr else None,
        width=fmt.get("width"),
        height=fmt.get("height"),
        fps=fmt.get("fps"),
    )


def _to_video_info(info: dict) -> VideoInfoResponse:
    """Map a yt-dlp info dict to the response schema."""
    duration = info.get("duration")
    return VideoInfoResponse(
        title=info.get("title") or "",
        author=info.get("uploader") or info.get("channel"),
        description=info.get("description"),
        duration=int(duration) if duration is not None else None,
        view_count=info.get("view_count"),
        publish_date=_parse_upload_date(info.get("upload_date")),
        formats=[_to_format(fmt) for fmt in info.get("formats") or []],
        thumbnails=[
            Thumbnail(url=thumb["url"], width=thumb.get("width"), height=thumb.get("height"))
            for thumb in info.get("thumbnails") or []
            if thumb.get("url")
        ],
    )


def _handle_timeout(url: str) -> DelegateFailureError:
    """Convert an extraction timeout to DelegateFailureError."""
    logger.error(
        "YouTube extraction for %s exceeded %.1fs",
        url,
        settings.delegate_timeout_seconds,
    )
    return DelegateFailureError(FETCH_FAILED_MESSAGE)


def _handle_download_error(error: DownloadError, url: str) -> DelegateFailureError:
    """Convert a yt-dlp extraction error to DelegateFailureError."""
    logger.error("YouTube extraction failed for %s: %s", url, error)
    return DelegateFailureError(FETCH_FAILED_MESSAGE)


async def get_video_info(url: str) -> VideoInfoResponse:
    """Get metadata for a YouTube video.

    Logic:
    1. Reject links that are not YouTube links (no network access)
    2. Extract metadata with yt-dlp under a deadline
    3. Map the result to the response schema

    Args:
        url: YouTube video link

    Returns:
        VideoInfoResponse with title, author, formats and thumbnails

    Raises:
        InvalidExternalLinkError: If url is not a YouTube link
        DelegateFailureError: If extraction fails or times out
    """
    if not _is_youtube_link(url):
        logger.warning("Rejected non-YouTube link: %s", url)
        raise InvalidExternalLinkError(url)

    try:
        info = await youtube_client.extract_info(url, timeout=settings.delegate_timeout_seconds)
        return _to_video_info(info)
    except asyncio.TimeoutError as e:
        raise _handle_timeout(url) from e
    except DownloadError as e:
        raise _handle_download_error(e, url) from e
    except Exception as e:
        logger.exception("Unexpected error while fetching video info for %s", url)
        raise DelegateFailureError(FETCH_FAILED_MESSAGE) from e
