from typing import Optional
from datetime import datetime
import uuid

from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.db.session import Base, utcnow


class User(Base):
    __tablename__ = "pa_users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
