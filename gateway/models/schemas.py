"""Pydantic schemas for response envelopes."""

from datetime import date

from pydantic import BaseModel, Field

from gateway.config import settings


def _creator() -> str:
    return settings.creator


class Envelope(BaseModel):
    """Fields shared by every JSON response."""

    status: bool = True
    creator: str = Field(default_factory=_creator)


class ErrorMessage(Envelope):
    """Response schema for all error responses."""

    status: bool = False
    code: int | None = None
    message: str


class ApiKeyStatusResponse(Envelope):
    """Response schema for an API key validity check."""

    message: str


class ApiKeyMessageResponse(Envelope):
    """Response schema after registering or deleting an API key."""

    message: str


class VideoFormat(BaseModel):
    """A single downloadable stream of a video."""

    itag: str
    url: str | None = None
    mime_type: str | None = None
    quality: str | None = None
    bitrate: int | None = None
    width: int | None = None
    height: int | None = None
    fps: float | None = None


class Thumbnail(BaseModel):
    """A thumbnail image of a video."""

    url: str
    width: int | None = None
    height: int | None = None


class VideoInfoResponse(Envelope):
    """Response schema for YouTube video metadata."""

    title: str
    author: str | None = None
    description: str | None = None
    duration: int | None = Field(None, description="Length in seconds")
    view_count: int | None = None
    publish_date: date | None = None
    formats: list[VideoFormat] = []
    thumbnails: list[Thumbnail] = []
