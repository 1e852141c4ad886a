"""
Contact (inquiry board) endpoints.

The listing and submission are public.  Reading the full entry,
replying and deleting require the password chosen at submission,
sent in the JSON body.  The ``/view`` and ``/replies`` sub-resources
are registered before the generic ``/{entry_id}`` route.
"""

from fastapi import APIRouter, Depends, status

from kmca_api.app.api.deps import json_body
from kmca_api.app.core.config import Settings
from kmca_api.app.core.security import get_settings
from kmca_api.app.core.store import CONTACT, JsonFileStore, get_store
from kmca_api.app.schemas.common import SuccessResponse
from kmca_api.app.schemas.contact import (
    ContactEntryCreate,
    ContactEntryListResponse,
    ContactEntryResponse,
    ContactPassword,
    ReplyCreate,
)
from kmca_api.app.services.contact_service import ContactService

router = APIRouter()


def contact_store(settings: Settings = Depends(get_settings)) -> JsonFileStore:
    return get_store(settings, CONTACT)


@router.get("/entries", response_model=ContactEntryListResponse, response_model_exclude_unset=True)
async def list_entries(store: JsonFileStore = Depends(contact_store)) -> dict:
    """Return the public listing: no body, replies or password digest."""
    entries = await ContactService.list_entries(store)
    return {"success": True, "entries": entries}


@router.post(
    "/entries",
    response_model=ContactEntryResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_entry(
    payload: ContactEntryCreate = Depends(json_body(ContactEntryCreate)),
    store: JsonFileStore = Depends(contact_store),
) -> dict:
    """Submit a new inquiry."""
    entry = await ContactService.create_entry(store, payload)
    return {"success": True, "entry": entry}


@router.post("/entries/{entry_id}/view", response_model=ContactEntryResponse, response_model_exclude_unset=True)
async def view_entry(
    entry_id: str,
    payload: ContactPassword = Depends(json_body(ContactPassword)),
    store: JsonFileStore = Depends(contact_store),
) -> dict:
    """Return the full entry when the password matches."""
    entry = await ContactService.view_entry(store, entry_id, payload.password)
    return {"success": True, "entry": entry}


@router.post("/entries/{entry_id}/replies", response_model=ContactEntryResponse, response_model_exclude_unset=True)
async def add_reply(
    entry_id: str,
    payload: ReplyCreate = Depends(json_body(ReplyCreate)),
    store: JsonFileStore = Depends(contact_store),
) -> dict:
    """Append a reply; gated by the entry password only."""
    entry = await ContactService.add_reply(store, entry_id, payload)
    return {"success": True, "entry": entry}


@router.delete("/entries/{entry_id}", response_model=SuccessResponse)
async def delete_entry(
    entry_id: str,
    payload: ContactPassword = Depends(json_body(ContactPassword)),
    store: JsonFileStore = Depends(contact_store),
) -> dict:
    """Delete an inquiry; the password travels in the request body."""
    await ContactService.delete_entry(store, entry_id, payload.password)
    return {"success": True}
