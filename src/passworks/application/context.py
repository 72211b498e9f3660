"""Caller-owned hashing configuration and strategy registry."""

from __future__ import annotations

import logging

from passworks.application.ports.hash_strategy_port import HashStrategy
from passworks.application.services.digest_service import DigestService
from passworks.application.services.strategy_registry import StrategyRegistry
from passworks.config.settings import PassworksConfig, PassworksSettings
from passworks.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class PassworksContext:
    """Configuration, strategies and digest service used by password records.

    A context starts uninitialized; `init` must run before fresh passwords are
    created from it. Strategy registrations survive re-initialization.
    """

    def __init__(
        self,
        config: PassworksConfig | None = None,
        *,
        registry: StrategyRegistry | None = None,
    ) -> None:
        self._config = config
        self.registry = registry if registry is not None else StrategyRegistry()
        self.digests = DigestService(registry=self.registry)

    @property
    def config(self) -> PassworksConfig | None:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    def init(
        self,
        config: PassworksConfig | dict[str, object] | None = None,
        /,
        **overrides: object,
    ) -> PassworksConfig:
        """Replace configuration wholesale; omitted fields take built-in defaults."""

        if isinstance(config, PassworksConfig):
            resolved = config.merged(overrides or None)
        else:
            resolved = PassworksConfig.model_validate({**(config or {}), **overrides})

        self._config = resolved
        logger.info(
            "passworks_initialized strategy=%s algorithm=%s iterations=%s key_length=%s",
            resolved.strategy,
            resolved.algorithm,
            resolved.iterations,
            resolved.key_length,
        )
        return resolved

    def init_from_settings(self, settings: PassworksSettings) -> PassworksConfig:
        """Initialize from environment-driven settings."""

        return self.init(settings.to_config())

    def require_config(self) -> PassworksConfig:
        """Return configuration or fail when init() has not been called."""

        if self._config is None:
            raise ConfigurationError(
                "Passworks configuration is not initialized; "
                "call init() before creating Password instances"
            )
        return self._config

    def add_strategy(self, name: str, fn: HashStrategy | None = None) -> None:
        """Register a hashing strategy on this context's registry."""

        self.registry.add_strategy(name, fn)


_default_context: PassworksContext | None = None


def get_default_context() -> PassworksContext:
    """Return the process-wide context, creating it uninitialized on first use."""

    global _default_context
    if _default_context is None:
        _default_context = PassworksContext()
    return _default_context


def reset_default_context() -> PassworksContext:
    """Discard the process-wide context, including its registered strategies."""

    global _default_context
    _default_context = PassworksContext()
    return _default_context
