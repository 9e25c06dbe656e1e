from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ORIGINS = [
    "http://localhost:5173",
    "https://post-digester-donation-frontend.vercel.app",
]

class Settings(BaseSettings):
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db: str = "post-digester-donation"
    use_mongo: bool = True

    jwt_secret: str = "dev"
    jwt_alg: str = "HS256"
    expires_in: str = "1d"

    host: str = "0.0.0.0"
    port: int = 5000
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = DEFAULT_ORIGINS
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
