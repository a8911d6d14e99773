"""Configuration loading via Pydantic settings."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel


class AuthConfig(BaseModel):
    secret_key: str = "secret-dev"
    algorithm: str = "HS256"

    @property
    def effective_secret_key(self) -> str:
        return os.getenv("JOBLY_SECRET_KEY", "") or self.secret_key


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False


class JoblyConfig(BaseModel):
    auth: AuthConfig = AuthConfig()
    web: WebConfig = WebConfig()
    db_path: str = "jobly.db"
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> JoblyConfig:
    """Load configuration from YAML file."""
    if config_path is None:
        config_path = Path("config.yaml")

    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return JoblyConfig(**data)

    return JoblyConfig()
