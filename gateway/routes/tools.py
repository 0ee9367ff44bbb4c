"""Utility routes gated by an API key: QR codes and YouTube lookups."""

from fastapi import APIRouter, Depends, Query, Response

from gateway.dependencies import require_api_key, require_param
from gateway.models.schemas import VideoInfoResponse
from gateway.services import qrcode_service, youtube_service

router = APIRouter(tags=["tools"], dependencies=[Depends(require_api_key)])


@router.api_route(
    "/qrcode",
    methods=["GET", "POST"],
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
    summary="Generate a QR code",
    description="Encodes the text parameter as a 256x256 PNG QR code.",
)
async def qrcode_endpoint(text: str | None = Query(None)) -> Response:
    """Generate a QR code image for the given text."""
    text = require_param("text", text)
    png = await qrcode_service.generate_qrcode(text)
    return Response(content=png, media_type="image/png")


@router.api_route(
    "/ytdl",
    methods=["GET", "POST"],
    response_model=VideoInfoResponse,
    summary="Get YouTube video metadata",
    description="Returns title, author, formats and thumbnails of a YouTube video.",
)
async def ytdl_endpoint(url: str | None = Query(None)) -> VideoInfoResponse:
    """Fetch metadata and stream URLs for a YouTube video.

    - Only youtube.com and youtu.be links are accepted
    - Extraction failures and timeouts are reported as "failed to fetch video info"
    """
    url = require_param("url", url)
    return await youtube_service.get_video_info(url)
