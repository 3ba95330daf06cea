"""Host configuration via pydantic-settings."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Listener
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    TIMEOUT_KEEP_ALIVE: int = 5

    # Static assets – relative paths are taken from the working directory
    ASSET_ROOT: str = "dist"
    # Defaults to <ASSET_ROOT>/index.html when unset
    FALLBACK_FILE: Optional[str] = None

    LOG_LEVEL: Literal["critical", "error", "warning", "info", "debug"] = "info"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _lower_log_level(cls, v):
        return v.lower() if isinstance(v, str) else v

    @property
    def asset_root(self) -> Path:
        return Path(self.ASSET_ROOT)

    @property
    def fallback_file(self) -> Path:
        if self.FALLBACK_FILE:
            return Path(self.FALLBACK_FILE)
        return self.asset_root / "index.html"


def load_settings(**overrides) -> Settings:
    """Build settings and pin the asset paths to absolute locations.

    Keyword overrides win over environment variables and ``.env``; ``None``
    values are ignored so CLI flags that were not given fall through.
    """
    s = Settings(**{k: v for k, v in overrides.items() if v is not None})
    asset_root = s.asset_root.resolve()
    fallback = Path(s.FALLBACK_FILE) if s.FALLBACK_FILE else asset_root / "index.html"
    return s.model_copy(
        update={
            "ASSET_ROOT": str(asset_root),
            "FALLBACK_FILE": str(fallback.resolve()),
        }
    )
