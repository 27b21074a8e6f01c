from functools import lru_cache
import json
import os
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}


class AppConfig(BaseModel):
    PROJECT_NAME: str = "design-patterns"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    TESTING: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_LEVEL_FILE: str = "WARNING"
    LOG_TO_FILE: bool = True
    LOG_DIR: str = "logs"
    LOG_FILE_NAME: str = "debug.log"

    model_config = ConfigDict(extra="ignore")

    @field_validator("LOG_LEVEL", "LOG_LEVEL_FILE", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {v!r}")
        return level


class DemoConfig(BaseModel):
    INDENT_WIDTH: int = Field(4, ge=0)
    SINGLETON_WORKERS: int = Field(10, gt=0)
    DEFAULT_AUTH_PROVIDERS: list[str] = Field(["google", "yandex"])

    model_config = ConfigDict(extra="ignore")

    @field_validator("DEFAULT_AUTH_PROVIDERS", mode="before")
    @classmethod
    def parse_provider_list(cls, v: Any) -> list[str]:
        if isinstance(v, list):
            return v
        if isinstance(v, str) and v.strip().startswith("[") and v.strip().endswith("]"):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(item) for item in parsed]
            except json.JSONDecodeError:
                pass
        sep = "," if "," in v else ";"
        return [item.strip() for item in v.split(sep) if item.strip()]


class Config(BaseModel):
    app: AppConfig
    demo: DemoConfig

    model_config = ConfigDict(extra="ignore")


@lru_cache
def get_settings() -> Config:
    """
    Cached settings factory. Override in tests via monkeypatching or ``cache_clear``.
    """
    env_filename = ".env.test" if os.getenv("TESTING") == "true" else ".env"
    env_file_values = dotenv_values(env_filename)
    merged_env: dict[str, Any] = {
        k: v
        for k, v in {**env_file_values, **dict(os.environ)}.items()
        if v is not None
    }

    return Config(
        app=AppConfig(**merged_env),
        demo=DemoConfig(**merged_env),
    )


config = get_settings()
