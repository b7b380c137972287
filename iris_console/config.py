from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    # Request store
    MAX_RETAINED_REQUESTS: int = 40
    CATALOG_PATH: str | None = None
    RANDOM_SEED: int | None = None

    # Alert banner
    BANNER_DISMISS_SECONDS: float = 2.0
    BANNER_CANCEL_PREVIOUS: bool = True

    # Notifications
    NOTIFICATIONS_ENABLED: bool = True
    NOTIFICATION_DELAY_SECONDS: float = 2.0
    FEEDBACK_ENABLED: bool = True

    # Console
    ACTIVE_CAREGIVERS: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    AUDIT_EXPORT_PATH: str | None = None

    # Environment
    ENVIRONMENT: str = "dev"
    SYNTHETIC_DATA_MODE: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
