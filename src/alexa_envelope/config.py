"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "alexa-envelope"

    # Skill
    skill_id: str = ""  # Expected applicationId; empty accepts any skill

    class Config:
        env_prefix = "ALEXA_ENVELOPE_"
        case_sensitive = False


settings = Settings()
