from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidFederationVersionError


SUPPORTED_FEDERATION_MAJOR_VERSIONS = (1, 2)
DEFAULT_LINK_NAMESPACE = "federation"


def parse_major_version(version: str) -> int:
    """Major part of a federation version string such as "1", "2" or "2.3"."""
    try:
        major = int(str(version).split(".", 1)[0])
    except ValueError:
        raise InvalidFederationVersionError(str(version)) from None

    if major not in SUPPORTED_FEDERATION_MAJOR_VERSIONS:
        raise InvalidFederationVersionError(str(version))
    return major


class Settings(BaseSettings):
    """
    Subgraph SDL printer settings
    """

    model_config = SettingsConfigDict(
        env_prefix="SUBGRAPH_SDL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Federation
    federation_version: str = "1"
    link_namespace: str = DEFAULT_LINK_NAMESPACE

    # Logging
    log_level: str = "INFO"
    log_format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"

    @field_validator("federation_version")
    @classmethod
    def check_federation_version(cls, value: str) -> str:
        parse_major_version(value)
        return value


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings
    """
    return Settings()
