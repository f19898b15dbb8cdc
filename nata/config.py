"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class PhrasingSettings(BaseSettings):
    """Optional LLM phrasing of resolved relationships."""

    model_config = SettingsConfigDict(env_prefix="PHRASING_")

    enabled: bool = False
    provider: str = "gemini"
    model: str = ""
    timeout_seconds: float = 8.0
    retry_backoff_seconds: float = 0.5
    temperature: float = 0.1
    max_tokens: int = 200


class KinshipSettings(BaseSettings):
    """Kinship engine settings."""

    model_config = SettingsConfigDict(env_prefix="KINSHIP_")

    self_term: str = "आफै (Self)"
    data_path: str = "data/family.json"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: str = ""
    google_api_key: str = ""
    groq_api_key: str = ""

    phrasing: PhrasingSettings = PhrasingSettings()
    kinship: KinshipSettings = KinshipSettings()


settings = Settings()
