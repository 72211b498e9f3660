from __future__ import annotations

import hashlib

import pytest

from passworks.application.context import PassworksContext
from passworks.application.password import Password
from passworks.application.ports.hash_strategy_port import StrategyContext
from passworks.domain.errors import PasswordError, StrategyError
from passworks.infrastructure.security.strategies import PBKDF2_DIGEST


async def _async_sha_strategy(secret: str, context: StrategyContext) -> str:
    digest = hashlib.new(context.algorithm)
    digest.update(context.salt.encode("utf-8"))
    digest.update(secret.encode("utf-8"))
    return digest.hexdigest()


@pytest.mark.asyncio
async def test_hash_persist_restore_and_verify_with_default_strategy() -> None:
    context = PassworksContext()
    context.init(key_length=32, iterations=2_000)

    stored = (await Password(context=context).digest("correct horse")).to_string()
    strategy, algorithm, iterations, key_length, salt, password_hash = stored.split(":")

    assert (strategy, algorithm, iterations, key_length) == ("pbkdf2", "sha256", "2000", "32")
    assert len(salt) == 64
    assert password_hash == hashlib.pbkdf2_hmac(
        PBKDF2_DIGEST,
        b"correct horse",
        salt.encode("utf-8"),
        2_000,
        32,
    ).hex()

    restored = Password.from_string(stored, context=context)
    assert await restored.matches("correct horse") is restored
    with pytest.raises(PasswordError):
        await restored.matches("battery staple")
    assert restored.to_string() == stored


@pytest.mark.asyncio
async def test_records_keep_their_own_parameters_after_reconfiguration() -> None:
    context = PassworksContext()
    context.init(key_length=16, iterations=1_000)
    stored = (await Password(context=context).digest("secret")).to_string()

    context.init(key_length=48, iterations=5_000, algorithm="sha512")
    restored = Password.from_string(stored, context=context)

    assert restored.key_length == 16
    assert restored.needs_rehash() is True
    assert (await restored.verify("secret")).matched is True


@pytest.mark.asyncio
async def test_custom_async_strategy_round_trip() -> None:
    context = PassworksContext()
    context.add_strategy("salted", _async_sha_strategy)
    context.init(strategy="salted", algorithm="sha256", key_length=8)

    password = await Password(context=context).digest("pw")
    restored = Password.from_string(str(password), context=context)

    assert restored.hash == hashlib.sha256(password.salt.encode("utf-8") + b"pw").hexdigest()
    assert (await restored.verify("pw")).matched is True
    assert (await restored.verify("PW")).matched is False


@pytest.mark.asyncio
async def test_bcrypt_kdf_strategy_round_trip() -> None:
    context = PassworksContext()
    context.init(strategy="bcrypt_pbkdf", iterations=50, key_length=16)

    password = await Password(context=context).digest("pw")
    restored = Password.from_string(password.to_string(), context=context)

    assert restored.strategy == "bcrypt_pbkdf"
    assert len(restored.hash or "") == 32
    assert await restored.matches("pw") is restored


@pytest.mark.asyncio
async def test_record_with_strategy_unknown_to_context_fails_on_verify() -> None:
    writer = PassworksContext()
    writer.add_strategy("salted", _async_sha_strategy)
    writer.init(strategy="salted", algorithm="sha1", key_length=8)
    stored = (await Password(context=writer).digest("pw")).to_string()

    restored = Password.from_string(stored, context=PassworksContext())

    with pytest.raises(StrategyError, match='Unknown strategy "salted"'):
        await restored.verify("pw")
