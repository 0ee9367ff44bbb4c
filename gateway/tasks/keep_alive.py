"""Background self-ping that keeps idle deployments awake."""

import asyncio
import contextlib
import logging

import httpx

from gateway.config import settings

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_task: asyncio.Task | None = None


async def ping(client: httpx.AsyncClient, url: str) -> bool:
    """Issue a single GET against url.

    Failures are logged and swallowed so the loop keeps running.

    Args:
        client: HTTP client used for the request
        url: Target URL

    Returns:
        True if the target answered with a non-error status
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Keep-alive ping to %s failed: %s", url, exc)
        return False
    except Exception:
        logger.exception("Unexpected error during keep-alive ping to %s", url)
        return False
    logger.debug("Keep-alive ping to %s returned %d", url, response.status_code)
    return True


async def run_keep_alive(client: httpx.AsyncClient, url: str, interval: float) -> None:
    """Ping url every interval seconds until cancelled."""
    while True:
        await asyncio.sleep(interval)
        await ping(client, url)


async def start_keep_alive() -> asyncio.Task | None:
    """Create the HTTP client and start the keep-alive task.

    Returns:
        The running task, or None if APP_URL is not configured
    """
    global _http_client, _task
    if not settings.app_url:
        logger.info("APP_URL not set, keep-alive disabled")
        return None
    _http_client = httpx.AsyncClient(timeout=10.0)
    _task = asyncio.create_task(
        run_keep_alive(_http_client, settings.app_url, settings.keep_alive_interval_seconds),
        name="keep-alive",
    )
    logger.info(
        "Keep-alive started for %s every %.0fs",
        settings.app_url,
        settings.keep_alive_interval_seconds,
    )
    return _task


async def stop_keep_alive() -> None:
    """Cancel the keep-alive task and close its HTTP client."""
    global _http_client, _task
    if _task:
        _task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await _task
        _task = None
        logger.info("Keep-alive stopped")
    if _http_client:
        await _http_client.aclose()
        _http_client = None
