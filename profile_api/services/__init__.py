"""Services module for the Profile API.

This module exports the service classes used by the API routes.
"""

from profile_api.services.journal_service import JournalQuery, JournalService
from profile_api.services.resource_service import ProfileService, ResourceService
from profile_api.services.storage_service import (
    GCSImageStore,
    ImageStore,
    LocalImageStore,
    create_image_store,
)

__all__ = [
    "JournalQuery",
    "JournalService",
    "ProfileService",
    "ResourceService",
    "ImageStore",
    "LocalImageStore",
    "GCSImageStore",
    "create_image_store",
]
