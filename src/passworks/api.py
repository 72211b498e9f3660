"""Convenience functions bound to the process-wide default context."""

from __future__ import annotations

from passworks.application.context import (
    PassworksContext,
    get_default_context,
    reset_default_context,
)
from passworks.application.password import Password
from passworks.application.ports.hash_strategy_port import HashStrategy, StrategyContext
from passworks.config.settings import PassworksConfig
from passworks.domain.errors import (
    ConfigurationError,
    ErrorKind,
    PassworksError,
    PasswordError,
    RecordFormatError,
    StrategyError,
)

__all__ = [
    "ConfigurationError",
    "ErrorKind",
    "HashStrategy",
    "Password",
    "PasswordError",
    "PassworksConfig",
    "PassworksContext",
    "PassworksError",
    "RecordFormatError",
    "StrategyContext",
    "StrategyError",
    "add_strategy",
    "get_default_context",
    "init",
    "reset_default_context",
]


def init(
    config: PassworksConfig | dict[str, object] | None = None,
    /,
    **overrides: object,
) -> PassworksConfig:
    """Replace the default context configuration; `init()` restores defaults."""

    return get_default_context().init(config, **overrides)


def add_strategy(name: str, fn: HashStrategy | None = None) -> None:
    """Register a strategy on the default context."""

    get_default_context().add_strategy(name, fn)
