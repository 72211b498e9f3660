"""Hashing configuration models and environment-driven settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]

DEFAULT_STRATEGY = "pbkdf2"
DEFAULT_ALGORITHM = "sha256"
DEFAULT_ITERATIONS = 128_000
DEFAULT_KEY_LENGTH = 64


class PassworksConfig(BaseModel):
    """Validated hashing parameters copied into every new password."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    strategy: NonEmptyStr = DEFAULT_STRATEGY
    algorithm: NonEmptyStr = DEFAULT_ALGORITHM
    iterations: PositiveInt = DEFAULT_ITERATIONS
    key_length: PositiveInt = Field(
        default=DEFAULT_KEY_LENGTH,
        validation_alias=AliasChoices("key_length", "key_len", "keyLength", "keyLen"),
    )

    def merged(self, overrides: PassworksConfig | dict[str, object] | None) -> PassworksConfig:
        """Return a copy with per-instance overrides applied and validated."""

        if overrides is None:
            return self
        if isinstance(overrides, PassworksConfig):
            return overrides
        explicit = PassworksConfig.model_validate(overrides)
        return self.model_copy(
            update={name: getattr(explicit, name) for name in explicit.model_fields_set}
        )


class PassworksSettings(BaseSettings):
    """Environment-driven defaults for the command line entrypoint."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    strategy: NonEmptyStr = Field(
        default=DEFAULT_STRATEGY,
        validation_alias="PASSWORKS_STRATEGY",
    )
    algorithm: NonEmptyStr = Field(
        default=DEFAULT_ALGORITHM,
        validation_alias="PASSWORKS_ALGORITHM",
    )
    iterations: PositiveInt = Field(
        default=DEFAULT_ITERATIONS,
        validation_alias="PASSWORKS_ITERATIONS",
    )
    key_length: PositiveInt = Field(
        default=DEFAULT_KEY_LENGTH,
        validation_alias="PASSWORKS_KEY_LENGTH",
    )
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")

    def to_config(self) -> PassworksConfig:
        """Build hashing configuration from loaded settings."""

        return PassworksConfig(
            strategy=self.strategy,
            algorithm=self.algorithm,
            iterations=self.iterations,
            key_length=self.key_length,
        )


@lru_cache(maxsize=1)
def load_settings() -> PassworksSettings:
    """Load and cache process settings."""

    return PassworksSettings()
