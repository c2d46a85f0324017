"""Upload storage configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class StorageConfig(BaseModel):
    """Configuration for the upload ingestor.

    Attributes:
        upload_dir: Flat directory that receives uploaded files.
    """

    upload_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("UPLOAD_DIR", "uploads")).resolve(),
        description="Directory where uploaded files are stored",
    )


def get_storage_config() -> StorageConfig:
    """Create storage configuration from environment."""
    return StorageConfig()
