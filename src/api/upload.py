"""File upload endpoint storing multipart uploads on local disk.

Accepts one or more files under the repeated ``files`` form field.
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from src.errors import GENERIC_UPLOAD_ERROR, InvalidInputError, ProcessingError
from src.models.schemas import ErrorResponse, UploadedFile, UploadResponse
from src.storage.ingestor import UploadIngestor, get_upload_ingestor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


async def _read_upload(file: UploadFile) -> UploadedFile:
    """Read an uploaded file into memory.

    Raises:
        ProcessingError: If the upload stream cannot be read.
    """
    try:
        content = await file.read()
    except Exception as e:
        logger.error(f"Failed to read uploaded file {file.filename}: {e}")
        raise ProcessingError(GENERIC_UPLOAD_ERROR) from e
    finally:
        await file.close()

    return UploadedFile(
        name=file.filename or "",
        declared_type=file.content_type or "",
        content=content,
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_files(
    files: list[UploadFile] | None = File(default=None),
    ingestor: UploadIngestor = Depends(get_upload_ingestor),
) -> UploadResponse:
    """Store uploaded files and return their metadata.

    Args:
        files: Uploaded files (multipart/form-data, field ``files``).

    Returns:
        UploadResponse with one record per stored file.

    Raises:
        400: No files uploaded.
        500: Upload directory or file write failure.
    """
    if not files:
        raise InvalidInputError("No files uploaded")

    payloads = [await _read_upload(file) for file in files]
    records = await ingestor.ingest(payloads)

    return UploadResponse(message="Files uploaded successfully", files=records)
