# recruitment_portal/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Store Config ---
    STORE_BACKEND: str = "memory"
    STORE_PATH: str = "portal_store.json"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "recruitment:"

    # --- Eligibility Rules ---
    MIN_AGE: int = 18
    MAX_AGE: int = 35

    # --- Accounts ---
    PASSWORD_MIN_LENGTH: int = 8
    PASSWORD_HASHING: bool = False

    # --- Requests ---
    DEFAULT_REQUEST_MESSAGE: str = "No additional notes"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
