from fastapi import APIRouter, Depends

from donation_api.deps import get_repo
from donation_api.services.stats import summarize

router = APIRouter(tags=["stats"])

@router.get("/statistics")
async def statistics(repo=Depends(get_repo)):
    return summarize(await repo.donation_statistics())
