"""Journal aggregate: the journal row, its entry revisions and taxonomy terms."""

from typing import List, Optional
from datetime import datetime
import uuid

from sqlalchemy import String, DateTime, ForeignKey, JSON, Text, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from profile_api.db.session import Base, utcnow

TAXONOMY_KINDS = ("categories", "subcategories", "topics", "tags")


class Journal(Base):
    __tablename__ = "pa_journals"

    journal_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    # Current version pointer, may be moved to any existing revision
    version: Mapped[int] = mapped_column(Integer, default=1)
    # Highest appended revision, compare-and-set key for appends
    head_version: Mapped[int] = mapped_column(Integer, default=1)
    status: Mapped[str] = mapped_column(String(64), index=True, default="pending")
    summary: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    entries: Mapped[List["JournalRevision"]] = relationship(
        back_populates="journal",
        cascade="all, delete-orphan",
        order_by="JournalRevision.version",
        lazy="selectin",
    )
    terms: Mapped[List["JournalTerm"]] = relationship(
        back_populates="journal",
        cascade="all, delete-orphan",
        order_by="JournalTerm.id",
        lazy="selectin",
    )

    def taxonomy(self) -> dict:
        """Group taxonomy terms by kind, preserving insertion order."""
        grouped = {kind: [] for kind in TAXONOMY_KINDS}
        for term in self.terms:
            grouped.setdefault(term.kind, []).append(term.value)
        return grouped


class JournalRevision(Base):
    __tablename__ = "pa_journal_entries"
    __table_args__ = (UniqueConstraint("journal_id", "version"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    journal_id: Mapped[str] = mapped_column(ForeignKey("pa_journals.journal_id", ondelete="CASCADE"), index=True)
    version: Mapped[int] = mapped_column(Integer)
    title: Mapped[str] = mapped_column(String(512), default="")
    content: Mapped[str] = mapped_column(Text, default="")
    attachments: Mapped[List[str]] = mapped_column(JSON, default=list)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    journal: Mapped["Journal"] = relationship(back_populates="entries")


class JournalTerm(Base):
    __tablename__ = "pa_journal_terms"
    __table_args__ = (UniqueConstraint("journal_id", "kind", "value"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    journal_id: Mapped[str] = mapped_column(ForeignKey("pa_journals.journal_id", ondelete="CASCADE"), index=True)
    kind: Mapped[str] = mapped_column(String(32))
    value: Mapped[str] = mapped_column(String(255), index=True)

    journal: Mapped[Optional["Journal"]] = relationship(back_populates="terms")
