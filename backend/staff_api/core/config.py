from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Staff API"

    # ---- DB ----
    DATABASE_URL: str = "sqlite:///./staff.db"
    DB_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = False

    # ---- Role service ----
    ROLE_SERVICE_URL: str = "http://localhost:5000/api"
    ROLE_SERVICE_TIMEOUT: float = 5.0

    # ---- Session ----
    SESSION_SECRET_KEY: str = "dev-session-secret-change-me"
    SESSION_COOKIE: str = "staff_session"
    SESSION_MAX_AGE: int = 60 * 60 * 24

    # ---- Security ----
    BCRYPT_ROUNDS: int = 10
    LOGIN_RATE_LIMIT: int = 10
    LOGIN_RATE_WINDOW_SEC: int = 60

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

