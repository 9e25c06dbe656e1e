# donation_api/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from donation_api.core.config import Settings
from donation_api.core.errors import ConflictError, UnauthorizedError
from donation_api.core.security import create_token, hash_password, parse_expires_in, verify_password
from donation_api.deps import get_repo, get_settings
from donation_api.schemas import LoginIn, RegisterIn

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)

@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn, repo=Depends(get_repo)):
    if await repo.find_user_by_email(body.email):
        raise ConflictError("User already exists")

    # bcrypt is slow on purpose; keep it off the event loop
    hashed = await run_in_threadpool(hash_password, body.password)
    await repo.create_user(body.name, body.email, hashed)

    logger.info("Registered user %s", body.email)
    return {"success": True, "message": "User registered successfully"}

@router.post("/login")
async def login(body: LoginIn, repo=Depends(get_repo), settings: Settings = Depends(get_settings)):
    user = await repo.find_user_by_email(body.email)
    if not user:
        logger.info("Login failed for unknown email %s", body.email)
        raise UnauthorizedError("Invalid email or password")

    ok = await run_in_threadpool(verify_password, body.password, user.get("password", ""))
    if not ok:
        logger.info("Login failed for %s", body.email)
        raise UnauthorizedError("Invalid email or password")

    token = create_token(
        {"email": user["email"]},
        settings.jwt_secret,
        settings.jwt_alg,
        parse_expires_in(settings.expires_in),
    )
    return {"success": True, "message": "Login successful", "token": token}
