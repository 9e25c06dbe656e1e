from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from donation_api.deps import get_repo

router = APIRouter(prefix="/testimonial", tags=["testimonials"])

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_testimonial(body: Dict[str, Any] = Body(...), repo=Depends(get_repo)):
    result = await repo.insert_testimonial(body)
    return {"success": True, "message": "testimonial added successfully", "result": result}

@router.get("")
async def list_testimonials(repo=Depends(get_repo)):
    result = await repo.list_testimonials()
    return {"success": True, "message": "testimonial fetched successfully", "result": result}
