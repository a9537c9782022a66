import logging
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    APP_ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./data/labseat.db"
    LOG_LEVEL: str = "INFO"
    # Retries of a replace that lost the unique(student_id) race to another process
    ASSIGN_MAX_RETRIES: int = 3
    # Soft per-computer capacity, only used for the load indicator
    CAPACITY_HINT: int = 10
    STUDENT_SECTION_REQUIRED: bool = True

    class Config:
        env_file = ".env"


settings = Settings()

if settings.CAPACITY_HINT <= 0:
    raise RuntimeError("CAPACITY_HINT musí být kladné číslo. Zkontrolujte .env soubor.")

if settings.ASSIGN_MAX_RETRIES < 0:
    raise RuntimeError("ASSIGN_MAX_RETRIES nesmí být záporné.")

if settings.APP_ENV == "production" and settings.DATABASE_URL.startswith("sqlite"):
    logger.warning("⚠️  Produkce běží nad SQLite — přiřazení jsou serializována jen v rámci jednoho procesu")
