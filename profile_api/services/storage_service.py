"""
Image storage for profile and certificate images.

Two backends share one contract: ``save_image`` stores a file under
``{owner_id}-{filename}`` and returns a URL the client can fetch it from.
Storing the same name twice overwrites the earlier file.
"""

import asyncio
import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional

from google.cloud import storage
from google.cloud.exceptions import GoogleCloudError

from profile_api.core.config import Settings

logger = logging.getLogger(__name__)


def image_name(owner_id: str, filename: str) -> str:
    """Object name for an uploaded image; directory parts are dropped."""
    return f"{owner_id}-{Path(filename).name}"


class ImageStore(ABC):
    """Persists an uploaded image and returns its URL."""

    @abstractmethod
    async def save_image(
        self,
        owner_id: str,
        filename: str,
        file_obj: BinaryIO,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Store an image.

        Args:
            owner_id: Owning user ID
            filename: Original file name
            file_obj: File-like object positioned anywhere
            content_type: MIME type, if known

        Returns:
            URL of the stored image
        """


class LocalImageStore(ImageStore):
    """Writes images to a directory served by the app under ``url_prefix``."""

    def __init__(self, base_path: str, url_prefix: str = "/images"):
        self.base_path = Path(base_path)
        self.url_prefix = url_prefix.rstrip("/")
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _write(self, target: Path, file_obj: BinaryIO) -> None:
        if hasattr(file_obj, "seek"):
            file_obj.seek(0)
        with open(target, "wb") as out:
            shutil.copyfileobj(file_obj, out)

    async def save_image(
        self,
        owner_id: str,
        filename: str,
        file_obj: BinaryIO,
        content_type: Optional[str] = None,
    ) -> str:
        name = image_name(owner_id, filename)
        target = self.base_path / name

        await asyncio.to_thread(self._write, target, file_obj)

        logger.info(f"Stored image {name} in {self.base_path}")
        return f"{self.url_prefix}/{name}"


class GCSImageStore(ImageStore):
    """Stores images in a Google Cloud Storage bucket."""

    def __init__(
        self,
        bucket_name: str,
        project_id: Optional[str] = None,
        client=None,
    ):
        """
        Initialize GCS image store.

        Args:
            bucket_name: Name of the GCS bucket
            project_id: GCP project ID
            client: Pre-built ``storage.Client``, created from ambient credentials if omitted
        """
        self.bucket_name = bucket_name
        self.project_id = project_id or None

        if client is None:
            try:
                client = storage.Client(project=self.project_id)
            except Exception as e:
                logger.error(f"Failed to initialize GCS client: {e}")
                raise

        self.client = client
        self.bucket = self.client.bucket(self.bucket_name)
        logger.info(f"GCS image store initialized: bucket={self.bucket_name}, project={self.project_id}")

    async def save_image(
        self,
        owner_id: str,
        filename: str,
        file_obj: BinaryIO,
        content_type: Optional[str] = None,
    ) -> str:
        name = image_name(owner_id, filename)
        blob = self.bucket.blob(name)

        if hasattr(file_obj, "seek"):
            file_obj.seek(0)

        try:
            await asyncio.to_thread(
                blob.upload_from_file,
                file_obj,
                content_type=content_type,
            )
        except GoogleCloudError as e:
            logger.error(f"GCS upload failed for {name}: {e}")
            raise

        try:
            await asyncio.to_thread(blob.make_public)
        except GoogleCloudError as e:
            logger.warning(f"Could not make blob public (bucket might have uniform access control): {e}")

        logger.info(f"Image uploaded to gs://{self.bucket_name}/{name}")
        return blob.public_url


def create_image_store(settings: Settings) -> ImageStore:
    """Build the image store selected by ``settings.image_store``."""
    if settings.image_store == "gcs":
        return GCSImageStore(
            bucket_name=settings.gcs_bucket_name,
            project_id=settings.gcp_project_id,
        )
    return LocalImageStore(base_path=settings.image_local_path)
