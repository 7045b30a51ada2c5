"""Journal-related Pydantic schemas."""

from typing import List
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class JournalStatus(str, Enum):
    """Known journal lifecycle states."""
    PENDING = "pending"
    PROCESSING = "processing"
    PUBLIC = "public"


class EntryPayload(BaseModel):
    """Body of a create or append request."""
    title: str = Field(default="", max_length=512)
    content: str = ""
    attachments: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Day 1",
                "content": "Started the migration to the new storage backend.",
                "attachments": ["/images/42-diagram.png"],
            }
        }
    )


class Taxonomy(BaseModel):
    categories: List[str] = Field(default_factory=list)
    subcategories: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class EntryResponse(BaseModel):
    version: int
    title: str
    content: str
    attachments: List[str] = Field(default_factory=list)
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class JournalResponse(BaseModel):
    """Full aggregate, returned to authenticated callers."""
    journal_id: str = Field(alias="journalID")
    user_id: str = Field(alias="userID")
    version: int
    entries: List[EntryResponse]
    status: str
    taxonomy: Taxonomy
    summary: str = ""
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class JournalPublicResponse(BaseModel):
    """Reduced projection for anonymous callers, one entry only."""
    journal_id: str = Field(alias="journalID")
    user_id: str = Field(alias="userID")
    version: int
    status: str
    taxonomy: Taxonomy
    summary: str = ""
    entries: List[EntryResponse]

    model_config = ConfigDict(populate_by_name=True)


class JournalMetaResponse(BaseModel):
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    version: int
    status: str
    user_id: str = Field(alias="userID")

    model_config = ConfigDict(populate_by_name=True)


class VersionRequest(BaseModel):
    version: int


class StatusRequest(BaseModel):
    status: str = Field(..., min_length=1, max_length=64)


class SummaryRequest(BaseModel):
    summary: str


class MessageResponse(BaseModel):
    message: str
