from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LOG_LEVELS = get_args(LogLevel)


class ClientSettings(BaseSettings):
    host: str = Field("localhost", validation_alias="INFON_HOST")
    port: int = Field(1234, validation_alias="INFON_PORT")

    traffic_interval: float = Field(1.0, gt=0, validation_alias="INFON_TRAFFIC_INTERVAL")
    enable_traffic: bool = Field(True, validation_alias="INFON_ENABLE_TRAFFIC")

    output_format: Literal["text", "json"] = Field("text", validation_alias="INFON_OUTPUT_FORMAT")
    log_level: LogLevel = Field("WARNING", validation_alias="INFON_LOG_LEVEL")
    text_encoding: str = Field("utf-8", validation_alias="INFON_TEXT_ENCODING")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> ClientSettings:
    return ClientSettings()
