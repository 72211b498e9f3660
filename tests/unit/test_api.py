from __future__ import annotations

import hashlib
from collections.abc import Iterator

import pytest

from passworks import api
from passworks.application.ports.hash_strategy_port import StrategyContext

MD5_CONFIG = {"key_len": 16, "iterations": 1_000, "algorithm": "md5", "strategy": "simple"}


@pytest.fixture(autouse=True)
def _fresh_default_context() -> Iterator[None]:
    api.reset_default_context()
    yield
    api.reset_default_context()


def _simple_strategy(secret: str, context: StrategyContext) -> str:
    return hashlib.new(context.algorithm, secret.encode("utf-8")).hexdigest()


def test_password_requires_init_on_default_context() -> None:
    with pytest.raises(TypeError, match=r"init\(\)"):
        api.Password()


def test_init_configures_default_context() -> None:
    api.init({"keyLen": 64})

    password = api.Password()

    assert password.key_length == 64
    assert password.context is api.get_default_context()


@pytest.mark.parametrize(("key_length", "salt_length"), [(100, 200), ("101", 202)])
def test_salt_length_follows_configured_key_length(
    key_length: int | str,
    salt_length: int,
) -> None:
    api.init(key_length=key_length)

    assert len(api.Password().salt) == salt_length


@pytest.mark.asyncio
async def test_added_strategy_is_used_by_default_context_passwords() -> None:
    api.init(MD5_CONFIG)
    api.add_strategy("simple", _simple_strategy)

    password_hash = await api.Password().digest("externalsecret", raw=True)

    assert password_hash == hashlib.md5(b"externalsecret").hexdigest()


def test_add_strategy_rejects_duplicates_on_default_context() -> None:
    api.add_strategy("test", _simple_strategy)

    with pytest.raises(api.StrategyError, match='Strategy "test" already exists'):
        api.add_strategy("test")


def test_add_strategy_rejects_missing_function() -> None:
    with pytest.raises(api.StrategyError, match='Expected second argument "fn" to be a function'):
        api.add_strategy("testNoFn")


def test_reset_default_context_clears_configuration() -> None:
    api.init()

    api.reset_default_context()

    assert api.get_default_context().is_initialized is False
