"""Built-in hashing strategies backed by hashlib and bcrypt."""

from __future__ import annotations

import hashlib

import bcrypt

from passworks.application.ports.hash_strategy_port import StrategyContext
from passworks.domain.errors import StrategyError

PBKDF2_STRATEGY = "pbkdf2"
HASH_STRATEGY = "hash"
BCRYPT_KDF_STRATEGY = "bcrypt_pbkdf"

# HMAC PRF for the default strategy; records do not carry it.
PBKDF2_DIGEST = "sha1"

# Upper bound on bcrypt_pbkdf rounds; PBKDF2-sized iteration counts would run for hours.
BCRYPT_KDF_MAX_ROUNDS = 1024


def pbkdf2_strategy(secret: str, context: StrategyContext) -> str:
    """PBKDF2-HMAC over the hex salt, hex-encoded to `key_length` bytes."""

    derived = hashlib.pbkdf2_hmac(
        PBKDF2_DIGEST,
        secret.encode("utf-8"),
        context.salt.encode("utf-8"),
        _required(context.iterations, strategy=PBKDF2_STRATEGY, field="iterations"),
        _required(context.key_length, strategy=PBKDF2_STRATEGY, field="key_length"),
    )
    return derived.hex()


def hash_digest_strategy(secret: str, context: StrategyContext) -> str:
    """Single salted digest using the record's hashlib algorithm."""

    digest = hashlib.new(context.algorithm)
    digest.update(context.salt.encode("utf-8"))
    digest.update(secret.encode("utf-8"))
    return digest.hexdigest()


def bcrypt_kdf_strategy(secret: str, context: StrategyContext) -> str:
    """bcrypt_pbkdf derivation with `iterations` used as the round count."""

    rounds = _required(context.iterations, strategy=BCRYPT_KDF_STRATEGY, field="iterations")
    if rounds > BCRYPT_KDF_MAX_ROUNDS:
        raise StrategyError(
            f'Strategy "{BCRYPT_KDF_STRATEGY}" accepts at most {BCRYPT_KDF_MAX_ROUNDS} '
            f"rounds, got {rounds}"
        )
    derived = bcrypt.kdf(
        password=secret.encode("utf-8"),
        salt=context.salt.encode("utf-8"),
        desired_key_bytes=_required(
            context.key_length, strategy=BCRYPT_KDF_STRATEGY, field="key_length"
        ),
        rounds=rounds,
    )
    return derived.hex()


def _required(value: int | None, *, strategy: str, field: str) -> int:
    if value is None:
        raise StrategyError(f'Strategy "{strategy}" requires {field}')
    return value
