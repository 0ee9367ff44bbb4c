"""QR code encoder backed by the qrcode library."""

import io
import logging

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M

from gateway.clients.delegate_pool import DelegatePool
from gateway.config import settings

logger = logging.getLogger(__name__)

BORDER = 4

pool = DelegatePool("qrcode", settings.delegate_max_workers)


def _render_png(text: str, size: int) -> bytes:
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, box_size=1, border=BORDER)
    qr.add_data(text)
    qr.make(fit=True)
    # Whole pixels per module so every module has the same width
    qr.box_size = max(1, size // (qr.modules_count + 2 * BORDER))
    image = qr.make_image(fill_color="black", back_color="white").get_image().convert("L")
    if image.width > size:
        image = image.resize((size, size), Image.Resampling.NEAREST)
    elif image.width < size:
        canvas = Image.new("L", (size, size), 255)
        offset = (size - image.width) // 2
        canvas.paste(image, (offset, offset))
        image = canvas
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


async def encode_png(text: str, size: int, timeout: float) -> bytes:
    """Encode text as a PNG QR code with medium error correction.

    The encoder runs on the QR delegate pool so it does not block the event loop.

    Args:
        text: Payload to encode
        size: Width and height of the image in pixels
        timeout: Seconds to wait for the encoder

    Returns:
        PNG image bytes

    Raises:
        TimeoutError: If encoding takes longer than timeout
        qrcode.exceptions.DataOverflowError: If text does not fit in a QR code
    """
    png = await pool.run(_render_png, text, size, timeout=timeout)
    logger.debug("Encoded %d characters into %d byte QR code", len(text), len(png))
    return png
