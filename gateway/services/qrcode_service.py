"""Business logic for QR code generation."""

import asyncio
import logging

from gateway.clients import qrcode_client
from gateway.config import settings
from gateway.exceptions import DelegateFailureError

logger = logging.getLogger(__name__)

ENCODE_FAILED_MESSAGE = "failed to generate qrcode"


async def generate_qrcode(text: str) -> bytes:
    """Render text as a fixed-size PNG QR code.

    Args:
        text: Payload to encode

    Returns:
        PNG image bytes

    Raises:
        DelegateFailureError: If the encoder fails or times out
    """
    try:
        return await qrcode_client.encode_png(
            text,
            size=settings.qrcode_size,
            timeout=settings.delegate_timeout_seconds,
        )
    except asyncio.TimeoutError as e:
        logger.error("QR encoding exceeded %.1fs", settings.delegate_timeout_seconds)
        raise DelegateFailureError(ENCODE_FAILED_MESSAGE) from e
    except Exception as e:
        logger.exception("QR encoding failed for %d characters", len(text))
        raise DelegateFailureError(ENCODE_FAILED_MESSAGE) from e
