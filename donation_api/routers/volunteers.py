from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from donation_api.deps import get_repo

router = APIRouter(prefix="/volunteer", tags=["volunteers"])

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_volunteer(body: Dict[str, Any] = Body(...), repo=Depends(get_repo)):
    result = await repo.insert_volunteer(body)
    return {"success": True, "message": "volunteer added successfully", "result": result}

@router.get("")
async def list_volunteers(repo=Depends(get_repo)):
    result = await repo.list_volunteers()
    return {"success": True, "message": "volunteer fetched successfully", "result": result}
