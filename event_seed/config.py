import warnings

from pydantic_settings import BaseSettings

PLACEHOLDER_ORGANIZATION_ID = "ORG001"


class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "bustracker"
    ORGANIZATION_ID: str = PLACEHOLDER_ORGANIZATION_ID
    SERVER_SELECTION_TIMEOUT_MS: int = 30000
    CONNECT_TIMEOUT_MS: int = 10000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env"}


settings = Settings()

if settings.ORGANIZATION_ID == PLACEHOLDER_ORGANIZATION_ID:
    warnings.warn(
        f"ORGANIZATION_ID is set to the placeholder value '{PLACEHOLDER_ORGANIZATION_ID}'. "
        "Set the real organization ID in your .env file before seeding a shared store.",
        stacklevel=1,
    )
