"""Application configuration"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Rendering
    swatch_size: int = 160

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        # Ignore unrelated environment variables
        extra="ignore",
    )


settings = Settings()
