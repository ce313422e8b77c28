from pathlib import Path
from typing import List

from pydantic.v1 import BaseSettings

BASE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    DB_PATH: str = str(BASE_DIR / "db" / "catalog.db")
    TEMPLATES_DIR: str = str(BASE_DIR / "templates")
    LOG_FILE: str = "file_main.log"
    LOG_RETENTION: str = "7 days"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:8000"]
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    class Config:
        env_file = ".env"


settings = Settings()
