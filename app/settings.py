from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content store
    POSTS_DIR: Path = BASE_DIR / "posts"
    POSTS_EXTENSIONS: List[str] = [".yaml"]

    # Rendering
    TEMPLATES_DIR: Path = BASE_DIR / "templates"
    STATIC_DIR: Path = BASE_DIR / "static"
    # Extra markdown-it rules on top of CommonMark, e.g. ["table"]
    MARKDOWN_EXTENSIONS: List[str] = []

    # Index: "per_request" rebuilds on every request, "shared" keeps one
    # index refreshed in the background
    INDEX_MODE: str = "per_request"
    INDEX_REFRESH_SECONDS: float = 60.0

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def shared_index(self) -> bool:
        return self.INDEX_MODE.lower() == "shared"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
