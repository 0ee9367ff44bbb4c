"""Builders for JSON response envelopes."""

from collections.abc import Mapping

from fastapi.responses import JSONResponse

from gateway.models.schemas import ErrorMessage


def error_response(
    status_code: int, message: str, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    """Build the error envelope shared by every failing endpoint.

    Args:
        status_code: HTTP status code, also reported in the "code" field
        message: Human readable description of the failure
        headers: Extra response headers, e.g. Allow on a 405

    Returns:
        JSONResponse with {status: false, creator, code, message}
    """
    body = ErrorMessage(code=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=dict(headers) if headers else None,
    )
