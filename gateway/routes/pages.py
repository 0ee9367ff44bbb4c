"""Static HTML page routes."""

import logging

from fastapi import APIRouter
from fastapi.responses import FileResponse

from gateway.config import settings
from gateway.exceptions import PageNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], include_in_schema=False)

PAGES = {
    "/": "index.html",
    "/about": "about.html",
    "/docs": "docs.html",
}


def _serve_page(filename: str) -> FileResponse:
    path = settings.views_dir / filename
    if not path.is_file():
        logger.warning("Static page missing on disk: %s", path)
        raise PageNotFoundError(filename)
    return FileResponse(path, media_type="text/html")


@router.get("/")
def index_page() -> FileResponse:
    return _serve_page(PAGES["/"])


@router.get("/about")
def about_page() -> FileResponse:
    return _serve_page(PAGES["/about"])


@router.get("/docs")
def docs_page() -> FileResponse:
    return _serve_page(PAGES["/docs"])
