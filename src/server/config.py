"""Application settings for the PDF conversion API."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "pdfgen-server"
    version: str = "1.0.0"
    api_prefix: str = "/api"
    environment: str = "local"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    max_upload_bytes: int = 10 * 1024 * 1024
    default_filename: str = "document.pdf"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
