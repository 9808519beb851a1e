"""Configuration loading for articleflow."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_URL = "my-mock-db"
DEFAULT_BLOG_PATH = Path(__file__).parent / "blog_posts" / "my-first-feature-article.md"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Workflow settings. Defaults are the demo's fixed constants."""

    model_config = SettingsConfigDict(env_prefix="ARTICLEFLOW_", frozen=True)

    # Store settings
    db_url: str = Field(default=DEFAULT_DB_URL, description="Mock store URL token")
    connect_delay: float = Field(default=1.0, description="Seconds before connect completes")
    create_delay: float = Field(default=2.0, description="Seconds before create completes")

    # Article settings
    blog_path: Path = Field(default=DEFAULT_BLOG_PATH, description="Markdown document to publish")
    article_title: str = Field(default="My first feature article!", description="Title of the record")
    article_tags: tuple[str, ...] = Field(default=("welcome", "news"), description="Tags of the record")

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render log lines as JSON")

    @field_validator("db_url")
    @classmethod
    def validate_db_url(cls, v: str) -> str:
        """Validate the store URL is not empty."""
        if not v or not v.strip():
            raise ValueError(
                "ARTICLEFLOW_DB_URL must not be empty. "
                "Use 'error' to simulate a failed connection."
            )
        return v.strip()

    @field_validator("connect_delay", "create_delay")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        """Validate store delays are non-negative."""
        if v < 0:
            raise ValueError(f"Store delay must be >= 0, got {v}.")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is one the logging module knows."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"ARTICLEFLOW_LOG_LEVEL '{v}' is not valid. "
                f"Use one of: {', '.join(LOG_LEVELS)}."
            )
        return level

    @field_validator("article_title")
    @classmethod
    def validate_article_title(cls, v: str) -> str:
        """Validate the article title is not blank."""
        if not v.strip():
            raise ValueError("ARTICLEFLOW_ARTICLE_TITLE must not be blank.")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
