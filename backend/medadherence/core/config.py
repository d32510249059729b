"""Module: config."""

from pydantic_settings import BaseSettings, SettingsConfigDict


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # SQLAlchemy connection string for the local medication store.
    database_url: str = "sqlite:///./medadherence.db"
    # Half-width of the window around a scheduled time in which "take now" is offered.
    dose_window_minutes: int = 30
    # Root log level passed to logging.config.
    log_level: str = "INFO"
    # Origins allowed to call the API from the browser UI.
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Configure pydantic-settings to also load values from local .env file.
    model_config = SettingsConfigDict(env_file=".env")


# Global settings instance imported by app modules at runtime.
settings = Settings()
