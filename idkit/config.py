from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    id_length: int = Field(default=8, ge=0)
    password_length: int = Field(default=16, ge=4)
    api_key_length: int = Field(default=32, ge=4)
    fast_seed: int | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = {"env_prefix": "IDKIT_"}


settings = Settings()
