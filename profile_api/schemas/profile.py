"""Profile and profile sub-resource Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProfilePayload(BaseModel):
    """Body of a profile create or replace request."""
    name: Optional[str] = None
    email: Optional[str] = None
    number: Optional[str] = None
    bio: Optional[str] = None
    profile_img: Optional[str] = None
    interests: Optional[str] = None
    domain: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "bio": "Analyst of engines.",
                "domain": "mathematics",
            }
        }
    )


class ProfileResponse(ProfilePayload):
    user_id: str

    model_config = ConfigDict(from_attributes=True)


class ProfileImageResponse(BaseModel):
    profile_image: str = Field(alias="profileImage")

    model_config = ConfigDict(populate_by_name=True)


class SkillPayload(BaseModel):
    name: str = ""
    proficiency_level: str = ""
    started_at: str = ""
    last_used: str = ""
    description: str = ""


class SkillResponse(SkillPayload):
    skill_id: str
    user_id: str

    model_config = ConfigDict(from_attributes=True)


class ExperiencePayload(BaseModel):
    company: str = ""
    position: str = ""
    start: str = ""
    end: str = ""
    description: str = ""
    notes: str = ""


class ExperienceResponse(ExperiencePayload):
    experience_id: str
    user_id: str

    model_config = ConfigDict(from_attributes=True)


class CredentialPayload(BaseModel):
    """Shared body for qualifications and certificates."""
    title: str = ""
    institution: str = ""
    start: str = ""
    end: str = ""
    description: str = ""
    cert_image: Optional[str] = None


class QualificationResponse(CredentialPayload):
    qualification_id: str
    user_id: str

    model_config = ConfigDict(from_attributes=True)


class CertificateResponse(CredentialPayload):
    certificate_id: str
    user_id: str

    model_config = ConfigDict(from_attributes=True)


class CertImageResponse(BaseModel):
    cert_image: str
