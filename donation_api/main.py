# donation_api/main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from donation_api import db
from donation_api.core.config import Settings, settings
from donation_api.core.errors import setup_error_handling
from donation_api.middleware.request_log import RequestLogMiddleware
from donation_api.repos import InMemoryRepo, MongoRepo
from donation_api.routers import auth, comments, donations, donors, stats, testimonials, volunteers

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    client = None

    if app_settings.use_mongo:
        client = db.connect(app_settings)
        database = db.get_database(client, app_settings)
        await db.ensure_indexes(database)
        app.state.repo = MongoRepo(database)
    else:
        logger.warning("USE_MONGO is off; data lives in process memory only")
        app.state.repo = InMemoryRepo()

    try:
        yield
    finally:
        if client is not None:
            db.close(client)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.log_level.upper())
    logging.getLogger("donation_api").setLevel(app_settings.log_level.upper())

    app = FastAPI(lifespan=lifespan, title="Post-Digester Donation API")
    app.state.settings = app_settings

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_error_handling(app)

    # ---------------- Include routers ----------------
    for module in (auth, donations, stats, donors, comments, testimonials, volunteers):
        app.include_router(module.router, prefix=app_settings.api_prefix)

    # Health
    @app.get("/")
    async def health():
        return {"message": "Server is running", "timestamp": datetime.now(timezone.utc)}

    return app


app = create_app()
