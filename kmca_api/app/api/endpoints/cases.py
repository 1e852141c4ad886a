"""
Case endpoints.

Cases are listed and read publicly.  Creating, deleting and counting a
view require the ``X-KMCA-Admin`` header to carry the configured admin
secret (see ``core.security.require_admin``).
"""

from fastapi import APIRouter, Depends, status

from kmca_api.app.api.deps import json_body
from kmca_api.app.core.config import Settings
from kmca_api.app.core.errors import NotFound
from kmca_api.app.core.security import get_settings, require_admin
from kmca_api.app.core.store import CASES, JsonFileStore, get_store
from kmca_api.app.schemas.case import CaseCreate, CaseListResponse, CaseResponse
from kmca_api.app.schemas.common import SuccessResponse
from kmca_api.app.services.case_service import CaseService

router = APIRouter()

NOT_FOUND_MESSAGE = "사례를 찾을 수 없습니다."


def case_store(settings: Settings = Depends(get_settings)) -> JsonFileStore:
    return get_store(settings, CASES)


@router.get("", response_model=CaseListResponse, response_model_exclude_unset=True)
async def list_cases(store: JsonFileStore = Depends(case_store)) -> dict:
    """Return every case, newest first, bodies included."""
    cases = await CaseService.list_cases(store)
    return {"success": True, "cases": cases}


@router.post(
    "",
    response_model=CaseResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_case(
    _: None = Depends(require_admin),
    payload: CaseCreate = Depends(json_body(CaseCreate)),
    store: JsonFileStore = Depends(case_store),
) -> dict:
    """Create a new case (admin only).

    The admin check is declared first so it runs before the body is read.
    """
    created = await CaseService.create_case(store, payload)
    return {"success": True, "case": created}


# Registered before ``/{case_id}`` so the sub-resource wins.
@router.patch("/{case_id}/views", response_model=CaseResponse, response_model_exclude_unset=True)
async def increment_case_views(
    case_id: str,
    _: None = Depends(require_admin),
    store: JsonFileStore = Depends(case_store),
) -> dict:
    """Add one to the view counter (admin only)."""
    updated = await CaseService.increment_views(store, case_id)
    if updated is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"success": True, "case": updated}


@router.get("/{case_id}", response_model=CaseResponse, response_model_exclude_unset=True)
async def get_case(case_id: str, store: JsonFileStore = Depends(case_store)) -> dict:
    """Retrieve a single case by id.

    Returns HTTP 404 if the case is not found.
    """
    found = await CaseService.get_case(store, case_id)
    if found is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return {"success": True, "case": found}


@router.delete("/{case_id}", response_model=SuccessResponse)
async def delete_case(
    case_id: str,
    _: None = Depends(require_admin),
    store: JsonFileStore = Depends(case_store),
) -> dict:
    """Delete a case (admin only)."""
    await CaseService.delete_case(store, case_id)
    return {"success": True}
