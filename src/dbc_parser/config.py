from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ParserConfig(BaseSettings):
    lossy_utf8: bool = False


class LoggingConfig(BaseSettings):
    level: str = "INFO"
    format: str = "structured"


class MetricsConfig(BaseSettings):
    enabled: bool = True


class Settings(BaseSettings):
    dbc_file: Path = Field(default=Path("./examples/simple.dbc"))

    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    class Config:
        env_nested_delimiter = "__"


def get_settings() -> Settings:
    return Settings()
