"""
Configuration management using pydantic-settings
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # OpenAI (vision analysis)
    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    analysis_temperature: float = 0.2

    # Replicate (image-to-image generation)
    replicate_api_token: Optional[str] = None
    replicate_base_url: str = "https://api.replicate.com/v1"
    replicate_model: str = "black-forest-labs/flux-dev"
    replicate_poll_interval: float = 1.0

    # Application
    public_base_url: Optional[str] = None
    cors_origins: str = "*"
    node_env: str = "production"
    log_level: str = "INFO"

    # Generated artifacts
    output_dir: str = "generated"
    max_upload_bytes: int = 25 * 1024 * 1024

    # Server
    host: str = "0.0.0.0"
    port: int = 8787

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def public_url(self) -> str:
        """Base URL that generated artifacts are served under"""
        base = self.public_base_url or f"http://localhost:{self.port}"
        return base.rstrip("/")

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)

    @property
    def is_openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def is_replicate_configured(self) -> bool:
        return bool(self.replicate_api_token)

    @property
    def include_error_details(self) -> bool:
        """Stack traces are only returned to clients outside production"""
        return self.node_env.lower() != "production"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, used as the default for create_app()"""
    return Settings()
