# trigrams/core/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    TOP_K: int = 100
    PROCESS_INDIVIDUALLY: bool = False
    INCLUDE_FINAL_TRIGRAM: bool = False
    ENCODING: str = "utf-8"
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_prefix = "TRIGRAMS_"
        env_file = ".env"
        extra = "ignore"
        frozen = True

    @field_validator("TOP_K")
    @classmethod
    def _check_top_k(cls, value: int) -> int:
        if value < 1:
            raise ValueError("TOP_K must be a positive integer")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def mode(self) -> str:
        return "individual" if self.PROCESS_INDIVIDUALLY else "combined"

settings = Settings()
