"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
BcryptRounds = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven registry settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    password_hash_rounds: BcryptRounds = Field(
        default=12,
        validation_alias="PASSWORD_HASH_ROUNDS",
    )
    registry_import_file: NonEmptyStr | None = Field(
        default=None,
        validation_alias="REGISTRY_IMPORT_FILE",
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache registry settings."""

    return Settings()
