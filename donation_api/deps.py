from fastapi import Request

from donation_api.core.config import Settings


def get_repo(request: Request):
    # set once by the lifespan; MongoRepo or InMemoryRepo
    return request.app.state.repo


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
