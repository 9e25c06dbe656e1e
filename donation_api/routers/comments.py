# donation_api/routers/comments.py
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, status

from donation_api.core.errors import NotFoundError
from donation_api.deps import get_repo
from donation_api.schemas import CommentIn

router = APIRouter(prefix="/comments", tags=["comments"])

def display_timestamp(now: Optional[datetime] = None) -> str:
    """e.g. "7/4/2026, 3:05:09 PM" """
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S} {'AM' if now.hour < 12 else 'PM'}"

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(body: CommentIn, repo=Depends(get_repo)):
    user = await repo.find_user_by_email(body.email)
    if user is None:
        raise NotFoundError("User not found")

    # commenter details are copied, not referenced
    doc = {
        "email": body.email,
        "commenterName": user.get("name"),
        "comments": body.comments,
        "commenterImage": user.get("image"),
        "timestamp": display_timestamp(),
    }
    result = await repo.insert_comment(doc)
    return {"success": True, "message": "comments added successfully", "result": result}

@router.get("")
async def list_comments(repo=Depends(get_repo)):
    result = await repo.list_comments()
    return {"success": True, "message": "Comments fetched successfully", "result": result}
