"""Pydantic schemas for the Profile API."""

from profile_api.schemas.auth import (
    RegisteredSchema,
    TokenSchema,
    UserLoginSchema,
    UserProfileSchema,
    UserRegistrationSchema,
)
from profile_api.schemas.journal import (
    EntryPayload,
    EntryResponse,
    JournalMetaResponse,
    JournalPublicResponse,
    JournalResponse,
    JournalStatus,
    MessageResponse,
    StatusRequest,
    SummaryRequest,
    Taxonomy,
    VersionRequest,
)
from profile_api.schemas.profile import (
    CertImageResponse,
    CertificateResponse,
    CredentialPayload,
    ExperiencePayload,
    ExperienceResponse,
    ProfileImageResponse,
    ProfilePayload,
    ProfileResponse,
    QualificationResponse,
    SkillPayload,
    SkillResponse,
)

__all__ = [
    # Auth
    "RegisteredSchema",
    "TokenSchema",
    "UserLoginSchema",
    "UserProfileSchema",
    "UserRegistrationSchema",
    # Journal
    "EntryPayload",
    "EntryResponse",
    "JournalMetaResponse",
    "JournalPublicResponse",
    "JournalResponse",
    "JournalStatus",
    "MessageResponse",
    "StatusRequest",
    "SummaryRequest",
    "Taxonomy",
    "VersionRequest",
    # Profile resources
    "CertImageResponse",
    "CertificateResponse",
    "CredentialPayload",
    "ExperiencePayload",
    "ExperienceResponse",
    "ProfileImageResponse",
    "ProfilePayload",
    "ProfileResponse",
    "QualificationResponse",
    "SkillPayload",
    "SkillResponse",
]
