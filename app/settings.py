from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_ROOT: str = "."
    POSTS_DIR: str = "_posts"
    DRAFTS_DIR: str = "_drafts"
    CONTENT_EXTENSIONS: List[str] = [".md", ".markdown"]
    WORDS_PER_MINUTE: int = 200

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    CONTENT_API_KEY: str = ""

    @property
    def posts_path(self) -> Path:
        return Path(self.CONTENT_ROOT) / self.POSTS_DIR

    @property
    def drafts_path(self) -> Path:
        return Path(self.CONTENT_ROOT) / self.DRAFTS_DIR


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
