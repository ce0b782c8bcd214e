from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike
from pathlib import Path
from tomllib import load

from pydantic import BaseModel, field_validator

DEFAULT_CONFIG_PATH = Path("config.toml")


class General(BaseModel):
    title: str
    version: str = "0.1.0"


class Logging(BaseModel):
    level: int

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(value.upper(), INFO)


class Paths(BaseModel):
    logs: str
    output: str


class Limits(BaseModel):
    max_file_size: int = 52428800  # 50 MB default
    max_encode_chars: int = 10_000_000
    max_decode_chars: int = 15_000_000  # ~10MB decoded
    max_data_url_chars: int = 7_000_000  # ~5MB


class Cron(BaseModel):
    default_runs: int = 10
    max_runs: int = 100


class Uuid(BaseModel):
    max_count: int = 1000


class RateLimit(BaseModel):
    timeout_period: int
    requests_per_second: int


class Network(BaseModel):
    host: str
    port: int
    reload: bool

    rate_limit: RateLimit


class Config(BaseModel):
    general: General
    paths: Paths
    limits: Limits = Limits()
    logging: Logging
    cron: Cron = Cron()
    uuid: Uuid = Uuid()
    network: Network


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files."""
    with Path(shared_config_file).open("rb") as f:
        config_data = load(f)

    # Top-level tables in the specific file replace the shared ones
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    return Config(**config_data)
