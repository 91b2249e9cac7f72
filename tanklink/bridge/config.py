from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class BridgeSettings(BaseSettings):
    queue_max_size: int = Field(100, ge=1, validation_alias="TANKLINK_QUEUE_MAX_SIZE")
    log_ring_size: int = Field(200, ge=1, validation_alias="TANKLINK_LOG_RING_SIZE")

    write_timeout: float = Field(10.0, gt=0, validation_alias="TANKLINK_WRITE_TIMEOUT")
    report_poll_interval: float = Field(1.0, gt=0, validation_alias="TANKLINK_REPORT_POLL_INTERVAL")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> BridgeSettings:
    return BridgeSettings()
