from __future__ import annotations

import pytest
from pydantic import ValidationError

from passworks.application.context import PassworksContext
from passworks.application.ports.hash_strategy_port import StrategyContext
from passworks.application.services.strategy_registry import StrategyRegistry
from passworks.config.settings import PassworksConfig, PassworksSettings
from passworks.domain.errors import ConfigurationError


def _noop(secret: str, context: StrategyContext) -> str:
    _ = context
    return secret


def test_new_context_is_uninitialized() -> None:
    context = PassworksContext()

    assert context.is_initialized is False
    with pytest.raises(ConfigurationError, match=r"call init\(\)"):
        context.require_config()


def test_init_replaces_config_wholesale() -> None:
    context = PassworksContext()
    context.init({"key_length": 10, "iterations": 5})

    resolved = context.init(algorithm="sha512")

    assert resolved == context.config
    assert resolved.algorithm == "sha512"
    assert resolved.key_length == 64
    assert resolved.iterations == 128_000


def test_init_without_arguments_resets_to_defaults() -> None:
    context = PassworksContext()
    context.init({"strategy": "hash"})

    assert context.init() == PassworksConfig()


def test_init_merges_keyword_overrides_into_config_model() -> None:
    context = PassworksContext()

    resolved = context.init(PassworksConfig(iterations=7), key_length="12")

    assert resolved.iterations == 7
    assert resolved.key_length == 12


def test_init_rejects_invalid_values() -> None:
    context = PassworksContext()

    with pytest.raises(ValidationError):
        context.init({"iterations": -5})

    assert context.is_initialized is False


def test_registrations_survive_reinitialization() -> None:
    context = PassworksContext()
    context.add_strategy("noop", _noop)

    context.init()
    context.init({"strategy": "noop"})

    assert "noop" in context.registry


def test_contexts_do_not_share_registries() -> None:
    first = PassworksContext()
    second = PassworksContext()

    first.add_strategy("noop", _noop)

    assert "noop" not in second.registry


def test_context_accepts_caller_owned_registry() -> None:
    registry = StrategyRegistry(include_builtins=False)

    context = PassworksContext(PassworksConfig(), registry=registry)

    assert context.registry is registry
    assert context.is_initialized is True


def test_init_from_settings_uses_settings_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSWORKS_KEY_LENGTH", "24")
    monkeypatch.delenv("PASSWORKS_STRATEGY", raising=False)
    context = PassworksContext()

    resolved = context.init_from_settings(PassworksSettings(_env_file=None))

    assert resolved.key_length == 24
    assert resolved.strategy == "pbkdf2"
