from fastapi import APIRouter, Depends

from api.deps import get_store
from store.memory import InMemoryRosterStore

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
async def healthcheck(store: InMemoryRosterStore = Depends(get_store)):
    return {
        "status": "ok",
        "nurses": len(await store.list_nurses()),
        "schedules": len(await store.list_schedules()),
    }
