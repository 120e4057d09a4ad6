"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "bibliotheque"
    app_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Reader defaults, used until a reader saves their own settings
    partner1_name: str = "Ian"
    partner2_name: str = "Hannah"
    default_goal: int = 24

    # Recap
    top_genre_limit: int = 3


# Create a singleton instance
settings = Settings()
