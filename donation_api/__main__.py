import uvicorn

from donation_api.core.config import settings

if __name__ == "__main__":
    uvicorn.run("donation_api.main:app", host=settings.host, port=settings.port)
