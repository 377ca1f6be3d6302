from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_store
from schemas.records import NurseRecord
from schemas.roster import CreateNurseRequest
from store.memory import InMemoryRosterStore

router = APIRouter(prefix="/nurses", tags=["Nurses"])


@router.get("", response_model=List[NurseRecord], summary="List Nurses")
async def list_nurses(store: InMemoryRosterStore = Depends(get_store)):
    return await store.list_nurses()


@router.post("", response_model=NurseRecord, status_code=201, summary="Create Nurse")
async def create_nurse(
    request: CreateNurseRequest, store: InMemoryRosterStore = Depends(get_store)
):
    """Only one responsible nurse may exist; a second one is rejected with 409."""
    return await store.create_nurse(request.name, request.role)


@router.delete("/{nurse_id}", status_code=204, summary="Delete Nurse")
async def delete_nurse(nurse_id: str, store: InMemoryRosterStore = Depends(get_store)):
    await store.delete_nurse(nurse_id)
