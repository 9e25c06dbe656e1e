from fastapi import APIRouter, Depends

from donation_api.deps import get_repo
from donation_api.schemas import DonorIn

router = APIRouter(prefix="/donor", tags=["donors"])

@router.post("")
async def record_donation(body: DonorIn, repo=Depends(get_repo)):
    created, result = await repo.record_donor(body.email, body.name, body.image, body.amount)
    key = "result" if created else "updatedDonation"
    return {"success": True, "message": "You provided Donation successfully!", key: result}

@router.get("")
async def list_donors(repo=Depends(get_repo)):
    data = await repo.list_donors()
    return {"success": True, "message": "successfully retrieve donors!", "data": data}
