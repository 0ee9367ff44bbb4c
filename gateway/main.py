"""Utility Gateway: FastAPI app and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.clients import qrcode_client, youtube_client
from gateway.config import settings
from gateway.exceptions import GatewayError
from gateway.responses import error_response
from gateway.routes import apikey, pages, tools
from gateway.services.key_store import KeyStore
from gateway.tasks.keep_alive import start_keep_alive, stop_keep_alive

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifespan: key store seeding, keep-alive and delegate pool lifecycle."""
    logger.info("Utility Gateway starting")
    app.state.key_store = KeyStore(settings.default_api_keys)
    logger.info("Key store seeded with %d keys", len(app.state.key_store))
    try:
        await start_keep_alive()
        yield
    finally:
        logger.info("Utility Gateway shutting down")
        await stop_keep_alive()
        youtube_client.pool.shutdown()
        qrcode_client.pool.shutdown()


app = FastAPI(
    title="Utility Gateway",
    description="API key registry, QR code generation and YouTube metadata lookup",
    version="0.1.0",
    lifespan=lifespan,
    # /docs is taken by the static documentation page
    docs_url="/api-docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    """Render business errors as the JSON error envelope."""
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render unknown routes, missing assets and bad methods as the error envelope."""
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


app.include_router(apikey.router)
app.include_router(tools.router)
app.include_router(pages.router)
app.mount("/public", StaticFiles(directory=settings.public_dir, check_dir=False), name="public")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Return service health status."""
    return {"status": "ok"}
