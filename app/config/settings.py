# app/config/settings.py

from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./meetable.db"  # overridden from .env or environment variable
    LOG_LEVEL: str = "INFO"
    DEFAULT_UNIVERSITY: str = "dev_uni"
    REGROUP_TRIALS: int = 100
    REGROUP_WORKERS: int = 0  # 0 runs every trial in-process
    REGROUP_SEED: Optional[int] = None
    SHUFFLE_BEFORE_BUCKETING: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
