"""Service error taxonomy shared by the chat relay and upload ingestor.

Every failure a request handler can produce is one of these. The API layer
renders them as ``{"error": message}`` with ``status_code``; underlying causes
are logged, never returned to the caller.
"""

from fastapi import status

GENERIC_CHAT_ERROR = "Failed to process request"
GENERIC_UPLOAD_ERROR = "Error uploading files"


class ServiceError(Exception):
    """Base class for errors surfaced to API callers.

    Attributes:
        message: Caller-facing error message.
        status_code: HTTP status the API layer responds with.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(ServiceError):
    """Raised when the caller's request is empty or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(ServiceError):
    """Raised when the inference server answers with a non-success status."""

    def __init__(self, upstream_status: int, message: str = GENERIC_CHAT_ERROR) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status

    def __str__(self) -> str:
        return f"Ollama API responded with status: {self.upstream_status}"


class ProcessingError(ServiceError):
    """Raised for any unexpected fault while handling a request."""
