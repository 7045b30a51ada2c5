from typing import Optional
import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.db.session import Base


def new_id() -> str:
    return uuid.uuid4().hex


class Profile(Base):
    __tablename__ = "pa_profiles"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    number: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    profile_img: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    interests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    domain: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class Skill(Base):
    __tablename__ = "pa_skills"

    skill_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    name: Mapped[str] = mapped_column(String(255), default="")
    proficiency_level: Mapped[str] = mapped_column(String(64), default="")
    started_at: Mapped[str] = mapped_column(String(64), default="")
    last_used: Mapped[str] = mapped_column(String(64), default="")
    description: Mapped[str] = mapped_column(Text, default="")


class Experience(Base):
    __tablename__ = "pa_experience"

    experience_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    company: Mapped[str] = mapped_column(String(255), default="")
    position: Mapped[str] = mapped_column(String(255), default="")
    start: Mapped[str] = mapped_column(String(64), default="")
    end: Mapped[str] = mapped_column(String(64), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    notes: Mapped[str] = mapped_column(Text, default="")


class Qualification(Base):
    __tablename__ = "pa_qualifications"

    qualification_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    title: Mapped[str] = mapped_column(String(255), default="")
    institution: Mapped[str] = mapped_column(String(255), default="")
    start: Mapped[str] = mapped_column(String(64), default="")
    end: Mapped[str] = mapped_column(String(64), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    cert_image: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)


class Certificate(Base):
    __tablename__ = "pa_certificates"

    certificate_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    title: Mapped[str] = mapped_column(String(255), default="")
    institution: Mapped[str] = mapped_column(String(255), default="")
    start: Mapped[str] = mapped_column(String(64), default="")
    end: Mapped[str] = mapped_column(String(64), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    cert_image: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
