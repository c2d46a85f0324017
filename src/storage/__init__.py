"""Local disk storage for uploaded files.

Responsibilities:
    - Upload directory setup
    - Unique ``<uuid>-<filename>`` naming
    - Sequential writes with rollback on a failed batch
"""

from src.storage.config import StorageConfig, get_storage_config
from src.storage.ingestor import UploadIngestor, get_upload_ingestor

__all__ = ["StorageConfig", "UploadIngestor", "get_storage_config", "get_upload_ingestor"]
