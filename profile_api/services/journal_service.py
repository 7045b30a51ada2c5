"""Journal versioning and visibility service.

A journal is an aggregate of an append-only list of entry revisions, a
movable "current version" pointer, a free-form status and taxonomy terms.
Appends are guarded by a compare-and-set on ``Journal.head_version`` so two
writers racing on the same journal cannot both produce the same revision
number; the loser gets ``VersionConflictError``.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import and_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.core.errors import (
    BadRequestError,
    InvalidVersionError,
    NotFoundError,
    VersionConflictError,
)
from profile_api.db.session import utcnow
from profile_api.models.journal import TAXONOMY_KINDS, Journal, JournalRevision, JournalTerm
from profile_api.schemas.journal import (
    EntryPayload,
    EntryResponse,
    JournalMetaResponse,
    JournalPublicResponse,
    JournalResponse,
    JournalStatus,
    Taxonomy,
)

logger = logging.getLogger(__name__)

KNOWN_STATUSES = {status.value for status in JournalStatus}


def parse_bound(value: str) -> datetime:
    """Parse a listing bound into the naive UTC form ``created_at`` is stored in."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise BadRequestError("Invalid date range")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@dataclass
class JournalQuery:
    """Structured filter for journal listings."""
    status: Optional[str] = None
    user_id: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    topic: Optional[str] = None
    tag: Optional[str] = None

    def taxonomy_filters(self) -> List[Tuple[str, str]]:
        pairs = (
            ("categories", self.category),
            ("subcategories", self.subcategory),
            ("topics", self.topic),
            ("tags", self.tag),
        )
        return [(kind, value) for kind, value in pairs if value]

    def created_range(self) -> list:
        """Inclusive ``created_at`` range, applied only when both bounds are given.

        Bounds are ISO-8601 dates or timestamps; timestamps with an offset are
        converted to UTC. A date-only ``end`` covers that whole day.
        """
        if not (self.start and self.end):
            return []
        start = parse_bound(self.start)
        end = parse_bound(self.end)
        if len(self.end) == 10:
            end = end.replace(hour=23, minute=59, second=59, microsecond=999999)
        return [Journal.created_at >= start, Journal.created_at <= end]

    def conditions(self) -> list:
        clauses = self.created_range()
        if self.status is not None:
            clauses.append(Journal.status == self.status)
        if self.user_id:
            clauses.append(Journal.user_id == self.user_id)
        for kind, value in self.taxonomy_filters():
            clauses.append(Journal.terms.any(and_(JournalTerm.kind == kind, JournalTerm.value == value)))
        return clauses


class JournalService:
    """Operations on journal aggregates for one database session."""

    def __init__(self, session: AsyncSession, strict_status: bool = False):
        self.session = session
        self.strict_status = strict_status

    async def _load(self, *criteria) -> Optional[Journal]:
        result = await self.session.execute(
            select(Journal)
            .where(*criteria)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get(self, journal_id: str) -> Journal:
        journal = await self._load(Journal.journal_id == journal_id)
        if journal is None:
            raise NotFoundError("Journal entry not found")
        return journal

    async def get_owned(self, journal_id: str, user_id: str) -> Journal:
        """Load a journal that belongs to ``user_id``.

        A journal owned by someone else is reported as missing.
        """
        journal = await self._load(Journal.journal_id == journal_id, Journal.user_id == user_id)
        if journal is None:
            raise NotFoundError("Journal entry not found")
        return journal

    async def create(self, user_id: str, payload: EntryPayload) -> Journal:
        now = utcnow()
        journal = Journal(
            user_id=user_id,
            version=1,
            head_version=1,
            status=JournalStatus.PENDING.value,
            summary="",
            created_at=now,
            updated_at=now,
            entries=[
                JournalRevision(
                    version=1,
                    title=payload.title,
                    content=payload.content,
                    attachments=list(payload.attachments),
                    updated_at=now,
                )
            ],
        )
        self.session.add(journal)
        await self.session.commit()
        logger.info(f"Created journal {journal.journal_id} for user {user_id}")
        return await self.get(journal.journal_id)

    async def append_entry(self, journal_id: str, user_id: str, payload: EntryPayload) -> Journal:
        """Append a new revision and point the journal at it."""
        journal = await self.get_owned(journal_id, user_id)
        return await self._write_revision(journal, journal.head_version, payload)

    async def _write_revision(self, journal: Journal, expected_head: int, payload: EntryPayload) -> Journal:
        # Read identifiers up front, a rollback expires the instance
        journal_id, owner_id = journal.journal_id, journal.user_id
        new_version = expected_head + 1
        now = utcnow()

        result = await self.session.execute(
            update(Journal)
            .where(
                Journal.journal_id == journal_id,
                Journal.user_id == owner_id,
                Journal.head_version == expected_head,
            )
            .values(head_version=new_version, version=new_version, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.session.rollback()
            logger.warning(
                f"Append to journal {journal_id} lost the race at head {expected_head}"
            )
            raise VersionConflictError()

        self.session.add(
            JournalRevision(
                journal_id=journal_id,
                version=new_version,
                title=payload.title,
                content=payload.content,
                attachments=list(payload.attachments),
                updated_at=now,
            )
        )
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.warning(f"Revision {new_version} already exists on journal {journal_id}")
            raise VersionConflictError()

        logger.info(f"Appended revision {new_version} to journal {journal_id}")
        return await self.get(journal_id)

    async def set_version(self, journal_id: str, user_id: str, version: int) -> Journal:
        """Move the current-version pointer to an existing revision."""
        await self.get_owned(journal_id, user_id)

        revision_exists = (
            select(JournalRevision.id)
            .where(JournalRevision.journal_id == journal_id, JournalRevision.version == version)
            .exists()
        )
        result = await self.session.execute(
            update(Journal)
            .where(Journal.journal_id == journal_id, Journal.user_id == user_id, revision_exists)
            .values(version=version, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.session.rollback()
            raise InvalidVersionError()

        await self.session.commit()
        logger.info(f"Journal {journal_id} now points at version {version}")
        return await self.get(journal_id)

    async def set_status(self, journal_id: str, user_id: str, status: str) -> None:
        if status not in KNOWN_STATUSES:
            if self.strict_status:
                raise BadRequestError("Invalid status")
            logger.warning(f"Journal {journal_id} set to unrecognised status {status!r}")

        result = await self.session.execute(
            update(Journal)
            .where(Journal.journal_id == journal_id, Journal.user_id == user_id)
            .values(status=status, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.session.rollback()
            raise NotFoundError("Journal entry not found")

        await self.session.commit()
        logger.info(f"Journal {journal_id} status set to {status}")

    async def set_taxonomy(self, journal_id: str, user_id: str, taxonomy: Taxonomy) -> Journal:
        journal = await self.get_owned(journal_id, user_id)

        # Flush removals first so re-added terms do not hit the unique constraint
        journal.terms.clear()
        await self.session.flush()

        for kind in TAXONOMY_KINDS:
            for value in _unique(getattr(taxonomy, kind)):
                journal.terms.append(JournalTerm(kind=kind, value=value))
        journal.updated_at = utcnow()

        await self.session.commit()
        return await self.get(journal_id)

    async def set_summary(self, journal_id: str, user_id: str, summary: str) -> Journal:
        journal = await self.get_owned(journal_id, user_id)
        journal.summary = summary
        journal.updated_at = utcnow()
        await self.session.commit()
        return await self.get(journal_id)

    async def list_journals(self, query: JournalQuery) -> List[Journal]:
        result = await self.session.execute(
            select(Journal)
            .where(*query.conditions())
            .order_by(Journal.created_at, Journal.journal_id)
        )
        return list(result.scalars().all())

    async def list_public(self, query: JournalQuery) -> List[Journal]:
        return await self.list_journals(replace(query, status=JournalStatus.PUBLIC.value))

    async def list_for_user(self, user_id: str) -> List[Journal]:
        return await self.list_journals(JournalQuery(user_id=user_id))

    async def delete(self, journal_id: str, user_id: str) -> bool:
        """Hard-delete an owned journal. Missing journals are not an error."""
        journal = await self._load(Journal.journal_id == journal_id, Journal.user_id == user_id)
        if journal is None:
            logger.info(f"Delete of journal {journal_id} by {user_id} matched nothing")
            return False

        await self.session.delete(journal)
        await self.session.commit()
        logger.info(f"Deleted journal {journal_id}")
        return True


def _unique(values: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def entries_to_response(revisions: Iterable[JournalRevision]) -> List[EntryResponse]:
    return [
        EntryResponse(
            version=revision.version,
            title=revision.title,
            content=revision.content,
            attachments=list(revision.attachments or []),
            updated_at=revision.updated_at,
        )
        for revision in revisions
    ]


def journal_to_response(journal: Journal) -> JournalResponse:
    return JournalResponse(
        journal_id=journal.journal_id,
        user_id=journal.user_id,
        version=journal.version,
        entries=entries_to_response(journal.entries),
        status=journal.status,
        taxonomy=Taxonomy(**journal.taxonomy()),
        summary=journal.summary or "",
        created_at=journal.created_at,
        updated_at=journal.updated_at,
    )


def journal_to_public_response(journal: Journal) -> JournalPublicResponse:
    # Anonymous readers see the last appended revision, not the pointer target
    latest = journal.entries[-1:]
    return JournalPublicResponse(
        journal_id=journal.journal_id,
        user_id=journal.user_id,
        version=journal.version,
        status=journal.status,
        taxonomy=Taxonomy(**journal.taxonomy()),
        summary=journal.summary or "",
        entries=entries_to_response(latest),
    )


def journal_to_meta(journal: Journal) -> JournalMetaResponse:
    return JournalMetaResponse(
        created_at=journal.created_at,
        updated_at=journal.updated_at,
        version=journal.version,
        status=journal.status,
        user_id=journal.user_id,
    )
