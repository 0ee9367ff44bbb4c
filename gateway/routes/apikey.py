"""API key routes for the Utility Gateway."""

from fastapi import APIRouter, Depends, Query

from gateway.dependencies import get_key_store, require_param
from gateway.exceptions import InvalidApiKeyError
from gateway.models.enums import KeyOutcome
from gateway.models.schemas import ApiKeyMessageResponse, ApiKeyStatusResponse
from gateway.services.key_store import KeyStore

router = APIRouter(tags=["apikey"])


@router.get(
    "/apikey",
    response_model=ApiKeyStatusResponse,
    summary="Check an API key",
    description="Confirms that the key in the query string is registered.",
)
def check_apikey_endpoint(
    key: str | None = Query(None),
    store: KeyStore = Depends(get_key_store),
) -> ApiKeyStatusResponse:
    """Check whether an API key is registered."""
    key = require_param("key", key)
    if not store.is_valid(key):
        raise InvalidApiKeyError()
    return ApiKeyStatusResponse(message="apikey is valid")


@router.post(
    "/apikey",
    response_model=ApiKeyMessageResponse,
    summary="Register an API key",
)
def add_apikey_endpoint(
    key: str | None = Query(None),
    store: KeyStore = Depends(get_key_store),
) -> ApiKeyMessageResponse:
    """Register a new API key.

    Registering a key twice is a no-op and reports that the key already exists.
    """
    key = require_param("key", key)
    if store.add(key) is KeyOutcome.ALREADY_EXISTS:
        return ApiKeyMessageResponse(message=f"apikey {key} is already registered")
    return ApiKeyMessageResponse(message=f"apikey {key} added")


@router.delete(
    "/apikey",
    response_model=ApiKeyMessageResponse,
    summary="Delete an API key",
)
def delete_apikey_endpoint(
    delete: str | None = Query(None),
    store: KeyStore = Depends(get_key_store),
) -> ApiKeyMessageResponse:
    """Delete an API key."""
    key = require_param("delete", delete)
    if store.remove(key) is KeyOutcome.NOT_FOUND:
        return ApiKeyMessageResponse(message=f"apikey {key} does not exist")
    return ApiKeyMessageResponse(message=f"apikey {key} removed")
