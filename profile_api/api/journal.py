"""Journal API routes."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from profile_api.core.dependencies import (
    get_current_user,
    get_current_user_required,
    get_journal_service,
)
from profile_api.models.user import User
from profile_api.schemas.journal import (
    EntryPayload,
    EntryResponse,
    JournalMetaResponse,
    JournalResponse,
    JournalStatus,
    MessageResponse,
    StatusRequest,
    SummaryRequest,
    Taxonomy,
    VersionRequest,
)
from profile_api.services.journal_service import (
    JournalQuery,
    JournalService,
    entries_to_response,
    journal_to_meta,
    journal_to_public_response,
    journal_to_response,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/journal", tags=["journal"])


@router.post(
    "",
    response_model=JournalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a journal",
    description="Create a journal whose first entry becomes version 1.",
)
async def create_journal(
    payload: EntryPayload,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.create(current_user.id, payload)
    return journal_to_response(journal)


@router.get(
    "",
    response_model=List[JournalResponse],
    summary="List public journals",
)
async def list_public_journals(
    start: Optional[str] = Query(None, description="Inclusive lower bound on createdAt (ISO-8601 date or timestamp)"),
    end: Optional[str] = Query(None, description="Inclusive upper bound on createdAt; a bare date covers the whole day"),
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
    topic: Optional[str] = None,
    tag: Optional[str] = None,
    user: Optional[str] = Query(None, description="Owning user ID"),
    service: JournalService = Depends(get_journal_service),
):
    query = JournalQuery(
        user_id=user,
        start=start,
        end=end,
        category=category,
        subcategory=subcategory,
        topic=topic,
        tag=tag,
    )
    journals = await service.list_public(query)
    return [journal_to_response(journal) for journal in journals]


@router.get(
    "/u/{user_id}",
    response_model=List[JournalResponse],
    summary="List a user's journals",
)
async def list_user_journals(
    user_id: str,
    service: JournalService = Depends(get_journal_service),
):
    journals = await service.list_for_user(user_id)
    return [journal_to_response(journal) for journal in journals]


@router.get(
    "/{journal_id}",
    response_model=None,
    responses={200: {"model": JournalResponse}},
    summary="Get a journal",
    description=(
        "Authenticated callers get the whole journal. Anonymous callers get a "
        "reduced view holding only the most recently appended entry."
    ),
)
async def get_journal(
    journal_id: str,
    current_user: Optional[User] = Depends(get_current_user),
    service: JournalService = Depends(get_journal_service),
) -> Dict[str, Any]:
    journal = await service.get(journal_id)
    if current_user is None:
        view = journal_to_public_response(journal)
    else:
        view = journal_to_response(journal)
    return view.model_dump(mode="json", by_alias=True)


@router.get(
    "/{journal_id}/meta",
    response_model=JournalMetaResponse,
    summary="Get journal metadata",
)
async def get_journal_meta(
    journal_id: str,
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.get(journal_id)
    return journal_to_meta(journal)


@router.get(
    "/{journal_id}/versions",
    response_model=List[EntryResponse],
    summary="List every entry version",
)
async def get_journal_versions(
    journal_id: str,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.get(journal_id)
    return entries_to_response(journal.entries)


@router.put(
    "/{journal_id}",
    response_model=JournalResponse,
    summary="Append an entry",
)
async def append_entry(
    journal_id: str,
    payload: EntryPayload,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.append_entry(journal_id, current_user.id, payload)
    return journal_to_response(journal)


@router.put(
    "/{journal_id}/version",
    response_model=JournalResponse,
    summary="Set the current version",
)
async def set_journal_version(
    journal_id: str,
    payload: VersionRequest,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.set_version(journal_id, current_user.id, payload.version)
    return journal_to_response(journal)


@router.put(
    "/{journal_id}/status",
    response_model=MessageResponse,
    summary="Set the journal status",
)
async def set_journal_status(
    journal_id: str,
    payload: StatusRequest,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    await service.set_status(journal_id, current_user.id, payload.status)
    return MessageResponse(message="Journal status updated")


@router.put(
    "/{journal_id}/process",
    response_model=MessageResponse,
    summary="Mark a journal for processing",
)
async def process_journal(
    journal_id: str,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    await service.set_status(journal_id, current_user.id, JournalStatus.PROCESSING.value)
    return MessageResponse(message="Journal entry is being processed")


@router.put(
    "/{journal_id}/taxonomy",
    response_model=JournalResponse,
    summary="Replace the taxonomy",
)
async def set_journal_taxonomy(
    journal_id: str,
    payload: Taxonomy,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.set_taxonomy(journal_id, current_user.id, payload)
    return journal_to_response(journal)


@router.put(
    "/{journal_id}/summary",
    response_model=JournalResponse,
    summary="Replace the summary",
)
async def set_journal_summary(
    journal_id: str,
    payload: SummaryRequest,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    journal = await service.set_summary(journal_id, current_user.id, payload.summary)
    return journal_to_response(journal)


@router.delete(
    "/{journal_id}",
    response_model=MessageResponse,
    summary="Delete a journal",
)
async def delete_journal(
    journal_id: str,
    current_user: User = Depends(get_current_user_required),
    service: JournalService = Depends(get_journal_service),
):
    await service.delete(journal_id, current_user.id)
    return MessageResponse(message="Journal entry deleted")
