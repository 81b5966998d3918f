from __future__ import annotations

from typing import Annotated, List
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Read by pydantic-settings (through python-dotenv) relative to the working
# directory; importing the package leaves os.environ untouched.
ENV_FILE_NAME = ".env"


class Settings(BaseSettings):
    DEFAULT_LOCALE: str = "en"
    RESOURCE_DIRS: Annotated[List[Path], NoDecode] = []
    LOG_LEVEL: str = "INFO"

    @field_validator("RESOURCE_DIRS", mode="before")
    @classmethod
    def parse_resource_dirs(cls, v):  # type: ignore
        if not v:
            return []
        if isinstance(v, (list, tuple)):
            return [Path(x) for x in v]
        if isinstance(v, str):
            # Comma separated, e.g. LOCALEKIT_RESOURCE_DIRS=/opt/locales,./extra
            return [Path(x.strip()) for x in v.split(",") if x.strip()]
        return []

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def check_default_locale(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DEFAULT_LOCALE must not be empty")
        return v.strip()

    model_config = SettingsConfigDict(
        env_prefix="LOCALEKIT_",
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
