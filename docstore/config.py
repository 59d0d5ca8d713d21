from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "DocStore"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = {"env_prefix": "DOCSTORE_", "env_file": ".env", "extra": "ignore"}

settings = Settings()
