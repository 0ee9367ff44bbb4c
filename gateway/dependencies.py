"""FastAPI dependency injection for the key store and API key checks."""

import logging

from fastapi import Depends, Query, Request

from gateway.exceptions import InvalidApiKeyError, MissingParameterError
from gateway.services.key_store import KeyStore

logger = logging.getLogger(__name__)


def get_key_store(request: Request) -> KeyStore:
    """Return the key store created during app startup.

    Raises:
        RuntimeError: If the app lifespan has not created the store
    """
    store = getattr(request.app.state, "key_store", None)
    if store is None:
        raise RuntimeError("Key store not initialized")
    return store


def require_param(name: str, value: str | None) -> str:
    """Return value, or raise MissingParameterError if it is absent or empty."""
    if not value:
        logger.warning("Request rejected: missing parameter %s", name)
        raise MissingParameterError(name)
    return value


def require_api_key(
    apikey: str | None = Query(None, description="Registered API key"),
    store: KeyStore = Depends(get_key_store),
) -> str:
    """Check the "apikey" query parameter against the key store.

    Returns:
        The validated API key

    Raises:
        MissingParameterError: If apikey is absent or empty
        InvalidApiKeyError: If apikey is not registered
    """
    key = require_param("apikey", apikey)
    if not store.is_valid(key):
        logger.warning("Request rejected: invalid apikey")
        raise InvalidApiKeyError()
    return key
