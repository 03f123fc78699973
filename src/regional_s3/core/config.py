"""Configuration management for regional-s3."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "regional-s3"
    otel_exporter_endpoint: str = "http://localhost:4317"

    default_region: str = "us-east-1"

    # Page caps for listings; callers may override per request
    list_max_keys: int = 1000
    version_max_keys: int = 1000

    model_config = {
        "env_prefix": "REGIONAL_S3_",
        "case_sensitive": False,
    }


settings = Settings()
