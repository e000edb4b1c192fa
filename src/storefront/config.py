"""
Configuration management for the Storefront backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True

    # Catalog
    seed_on_startup: bool = True  # start from the bundled seed catalog or an empty store

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "STOREFRONT_"
        case_sensitive = False


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        seed_on_startup=settings.seed_on_startup,
    )
