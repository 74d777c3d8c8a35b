"""Service Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Each service reads its port from <OPERATION>_SERVICE_PORT, default per Operation
    - Unset or empty variables fall back to the default
    - get_settings() is cached (lru_cache): one instance per operation per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - One subclass per operation: env_prefix scopes HOST/PORT, logging vars stay shared
"""

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from arithmetic_services.core.domain_types import Operation


class ServiceSettings(BaseSettings):
    """Settings shared by every operation service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    operation: ClassVar[Operation]

    host: str = "0.0.0.0"
    port: int = Field(ge=0, le=65535)

    # Observability
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "text"] = Field("json", validation_alias="LOG_FORMAT")


class AdderSettings(ServiceSettings):
    model_config = SettingsConfigDict(env_prefix="ADDER_SERVICE_")
    operation: ClassVar[Operation] = Operation.ADD
    port: int = Field(Operation.ADD.default_port, ge=0, le=65535)


class SubtractorSettings(ServiceSettings):
    model_config = SettingsConfigDict(env_prefix="SUBTRACTOR_SERVICE_")
    operation: ClassVar[Operation] = Operation.SUBTRACT
    port: int = Field(Operation.SUBTRACT.default_port, ge=0, le=65535)


class MultiplierSettings(ServiceSettings):
    model_config = SettingsConfigDict(env_prefix="MULTIPLIER_SERVICE_")
    operation: ClassVar[Operation] = Operation.MULTIPLY
    port: int = Field(Operation.MULTIPLY.default_port, ge=0, le=65535)


class DividerSettings(ServiceSettings):
    model_config = SettingsConfigDict(env_prefix="DIVIDER_SERVICE_")
    operation: ClassVar[Operation] = Operation.DIVIDE
    port: int = Field(Operation.DIVIDE.default_port, ge=0, le=65535)


SETTINGS_CLASSES: dict[Operation, type[ServiceSettings]] = {
    Operation.ADD: AdderSettings,
    Operation.SUBTRACT: SubtractorSettings,
    Operation.MULTIPLY: MultiplierSettings,
    Operation.DIVIDE: DividerSettings,
}


@lru_cache
def get_settings(operation: Operation) -> ServiceSettings:
    return SETTINGS_CLASSES[operation]()
