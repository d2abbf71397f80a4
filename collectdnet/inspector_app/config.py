from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

InputFormat = Literal["raw", "hex", "base64"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InspectorSettings(BaseSettings):
    types_db_path: Optional[str] = Field(None, validation_alias="TYPES_DB_PATH")
    input_format: InputFormat = Field("raw", validation_alias="INPUT_FORMAT")
    strict: bool = Field(False, validation_alias="STRICT")

    log_level: LogLevel = Field("INFO", validation_alias="LOG_LEVEL")
    log_ring_size: int = Field(200, gt=0, validation_alias="LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> InspectorSettings:
    return InspectorSettings()
