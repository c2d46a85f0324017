"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Individual message in conversation
    - ChatRequest / ChatResponse: Chat endpoint payloads
    - GenerationRequest / GenerationResult: Inference server wire format
    - UploadedFile / StoredFileRecord: Upload ingress and stored metadata
    - UploadResponse / ErrorResponse: Upload endpoint and error payloads
"""

from src.models.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    GenerationRequest,
    GenerationResult,
    Message,
    StoredFileRecord,
    UploadedFile,
    UploadedFileRef,
    UploadResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "GenerationRequest",
    "GenerationResult",
    "Message",
    "StoredFileRecord",
    "UploadResponse",
    "UploadedFile",
    "UploadedFileRef",
]
