import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GREATCIRCLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"  # DEBUG shows longitude wrapping
    log_format: str = "%(levelname)s %(name)s %(message)s"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install a root handler (if none exists) and set the level of the greatcircle loggers."""
    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    logging.getLogger("greatcircle").setLevel(settings.log_level)
