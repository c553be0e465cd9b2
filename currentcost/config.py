import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

from currentcost.logging import create_logger


class DecoderSettings(BaseSettings):
    debug: bool = Field(False, validation_alias="DEVICE_CURRENT_COST_DEBUG")
    log_ring_size: int = Field(200, validation_alias="CURRENT_COST_LOG_RING_SIZE")
    logger_name: str = Field("currentcost", validation_alias="CURRENT_COST_LOGGER")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    def create_logger(self) -> logging.Logger:
        return create_logger(self.logger_name, self.log_ring_size, debug=self.debug)


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
