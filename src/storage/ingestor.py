"""Upload ingestor writing multipart uploads to local disk.

Each file is stored as ``<uuid>-<original filename>`` in a single flat
directory. Files are written one at a time; if any write fails, the files
already written by the same request are removed before the error is raised.
"""

import asyncio
import logging
import uuid
from collections.abc import Sequence
from pathlib import Path

from src.errors import GENERIC_UPLOAD_ERROR, InvalidInputError, ProcessingError
from src.models.schemas import StoredFileRecord, UploadedFile
from src.storage.config import StorageConfig, get_storage_config

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
FALLBACK_FILENAME = "file"


def _storage_name(file_id: str, original_name: str) -> str:
    """Build the on-disk name, keeping only the final path component."""
    base = Path(original_name.replace("\\", "/")).name or FALLBACK_FILENAME
    return f"{file_id}-{base}"


def _write_file(path: Path, content: bytes) -> None:
    # Exclusive create: an existing file is never overwritten
    f = open(path, "xb")
    try:
        with f:
            f.write(content)
    except BaseException:
        # The file was created by this call, so a partial write is removed
        path.unlink(missing_ok=True)
        raise


class UploadIngestor:
    """Persists uploaded files and describes what was stored."""

    def __init__(self, config: StorageConfig | None = None) -> None:
        """Initialize the ingestor.

        Args:
            config: Optional storage configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_storage_config()

    @property
    def upload_dir(self) -> Path:
        """Directory that receives uploaded files."""
        return self._config.upload_dir

    def _ensure_upload_dir(self) -> None:
        """Create the upload directory if it does not exist.

        Raises:
            ProcessingError: If the directory cannot be created.
        """
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating upload directory {self.upload_dir}: {e}")
            raise ProcessingError(GENERIC_UPLOAD_ERROR) from e

    def _rollback(self, paths: list[Path]) -> None:
        """Remove files written earlier in a failed batch."""
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Failed to remove partial upload {path}: {e}")

    async def ingest(self, files: Sequence[UploadedFile]) -> list[StoredFileRecord]:
        """Write each uploaded file to the upload directory.

        Args:
            files: Uploaded payloads, stored in the order given.

        Returns:
            One StoredFileRecord per input file, in input order.

        Raises:
            InvalidInputError: If no files were uploaded.
            ProcessingError: If the directory or any file cannot be written.
        """
        if not files:
            raise InvalidInputError("No files uploaded")

        self._ensure_upload_dir()

        records: list[StoredFileRecord] = []
        written: list[Path] = []

        try:
            for file in files:
                file_id = str(uuid.uuid4())
                path = self.upload_dir / _storage_name(file_id, file.name)

                await asyncio.to_thread(_write_file, path, file.content)
                written.append(path)

                records.append(
                    StoredFileRecord(
                        id=file_id,
                        name=file.name,
                        type=file.declared_type or DEFAULT_CONTENT_TYPE,
                        path=str(path),
                        size=len(file.content),
                    )
                )
        except Exception as e:
            logger.exception(f"Error handling file upload: {e}")
            self._rollback(written)
            raise ProcessingError(GENERIC_UPLOAD_ERROR) from e

        logger.info(f"Stored {len(records)} uploaded file(s) in {self.upload_dir}")
        return records


# Module-level singleton instance
_upload_ingestor: UploadIngestor | None = None


def get_upload_ingestor() -> UploadIngestor:
    """Get or create the global upload ingestor.

    Returns:
        The UploadIngestor instance.
    """
    global _upload_ingestor
    if _upload_ingestor is None:
        _upload_ingestor = UploadIngestor()
    return _upload_ingestor
