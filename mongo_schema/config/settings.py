# Configuration management

from pydantic import Field
from pydantic_settings import BaseSettings  # type: ignore
from functools import lru_cache


class Settings(BaseSettings):
    # Sampling
    max_try_records: int = Field(100, gt=0)  # documents per collection and elements per array
    preserve_first_entry: bool = False  # legacy ordering: entry 0 stays unsorted

    # MongoDB
    server_selection_timeout_ms: int = Field(5000, gt=0)

    # Output
    output_format: str = "json"  # json or csv

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    class Config:
        env_prefix = "MONGO_SCHEMA_"
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
