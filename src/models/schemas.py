from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant", "system"]


class Message(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker identifier (user, assistant, or system).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class UploadedFileRef(BaseModel):
    """Upload metadata a client attaches to a later chat request."""

    id: str
    name: str
    type: str
    path: str
    size: int = Field(ge=0)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        messages: Conversation in order, oldest first.
        model: Model identifier; the configured default is used when absent.
        files: Previously uploaded files referenced by the client.
    """

    messages: list[Message]
    model: str | None = None
    files: list[UploadedFileRef] | None = None


class ChatResponse(BaseModel):
    """Generated answer relayed back to the client."""

    response: str


class GenerationRequest(BaseModel):
    """Body of ``POST /api/generate`` on the inference server."""

    model: str
    prompt: str
    stream: bool = False


class GenerationResult(BaseModel):
    """Non-streaming reply from the inference server.

    Only ``response`` is consumed; timing and context fields are ignored.
    """

    response: str


class UploadedFile(BaseModel):
    """A file payload received from a multipart submission.

    Attributes:
        name: Original filename as sent by the client.
        declared_type: Content type declared by the client.
        content: Raw file bytes.
    """

    name: str
    declared_type: str
    content: bytes


class StoredFileRecord(BaseModel):
    """Metadata describing a file written to the upload directory.

    Attributes:
        id: Unique identifier generated at upload time.
        name: Original filename.
        type: Declared content type.
        path: Location of the stored file.
        size: Number of bytes written.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str
    path: str
    size: int = Field(ge=0)


class UploadResponse(BaseModel):
    """Response after a successful upload."""

    message: str
    files: list[StoredFileRecord]


class ErrorResponse(BaseModel):
    """Body returned for any service error."""

    error: str
