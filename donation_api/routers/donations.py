# donation_api/routers/donations.py
import logging
from typing import Any, Dict

from bson.errors import InvalidId
from fastapi import APIRouter, Body, Depends, status
from pymongo.errors import PyMongoError

from donation_api.core.errors import ApiError, NotFoundError
from donation_api.deps import get_repo

router = APIRouter(prefix="/donations", tags=["donations"])
logger = logging.getLogger(__name__)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_donation(body: Dict[str, Any] = Body(...), repo=Depends(get_repo)):
    result = await repo.insert_donation(body)
    return {"success": True, "message": "Donation created successfully", "result": result}

@router.get("")
async def list_donations(repo=Depends(get_repo)):
    result = await repo.list_donations()
    return {"success": True, "message": "All Donation retrieved successfully", "result": result}

@router.get("/{donation_id}")
async def get_donation(donation_id: str, repo=Depends(get_repo)):
    try:
        result = await repo.get_donation(donation_id)
    except (InvalidId, PyMongoError):
        logger.exception("Error fetching donation %s", donation_id)
        raise ApiError("Internal server error")

    if result is None:
        raise NotFoundError("Donation not found")
    return {"success": True, "message": "Donation fetched successfully", "result": result}

@router.patch("/{donation_id}")
async def update_donation(donation_id: str, body: Dict[str, Any] = Body(...), repo=Depends(get_repo)):
    # partial patch: only the keys present in the body are written
    try:
        result = await repo.update_donation(donation_id, body)
    except (InvalidId, PyMongoError):
        logger.exception("Error updating donation %s", donation_id)
        raise ApiError("Failed to update donation")
    return {"success": True, "message": "Donation updated successfully", "result": result}

@router.delete("/{donation_id}")
async def delete_donation(donation_id: str, repo=Depends(get_repo)):
    try:
        result = await repo.delete_donation(donation_id)
    except (InvalidId, PyMongoError):
        logger.exception("Error deleting donation %s", donation_id)
        raise ApiError("Failed to delete donation")
    return {"success": True, "message": "Donation deleted successfully", "result": result}
