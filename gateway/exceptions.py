"""Business exceptions for the Utility Gateway."""

from fastapi import status


class GatewayError(Exception):
    """Base class for errors rendered as a JSON error envelope."""

    status_code: int = status.HTTP_406_NOT_ACCEPTABLE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParameterError(GatewayError):
    """Raised when a required query parameter is absent or empty."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"missing parameter: {parameter}")


class InvalidApiKeyError(GatewayError):
    """Raised when the supplied API key is not registered."""

    def __init__(self):
        super().__init__("invalid apikey")


class InvalidExternalLinkError(GatewayError):
    """Raised when a link does not point at a supported host."""

    def __init__(self, url: str):
        self.url = url
        super().__init__("invalid link, only youtube.com or youtu.be urls are supported")


class DelegateFailureError(GatewayError):
    """Raised when the QR encoder or the YouTube extractor fails or times out."""


class PageNotFoundError(GatewayError):
    """Raised when a static page is missing on disk."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, page: str):
        self.page = page
        super().__init__(f"page {page} not found")
