# src/rentadvisor/config.py

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    # Tell Pydantic to load from .env
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",   # ignore unknown env vars
    )

    # Hugging Face token for the hosted rent model (required at request time)
    HF_TOKEN: Optional[str] = Field(default=None)
    MODEL_SPACE: str = Field(default="RentPrediction/Fin_analysis")
    MODEL_API_NAME: str = Field(default="/predict")
    LOG_LEVEL: str = Field(default="INFO")


def get_settings() -> Settings:
    """Build settings from the current environment.

    Not cached: the token is looked up on every request so a rotated
    HF_TOKEN is picked up without a restart.
    """
    return Settings()
