"""Named registry of hashing strategies shared by password records."""

from __future__ import annotations

import logging

from passworks.application.ports.hash_strategy_port import HashStrategy
from passworks.domain.errors import StrategyError
from passworks.domain.password_record import RECORD_DELIMITER
from passworks.infrastructure.security.strategies import (
    BCRYPT_KDF_STRATEGY,
    HASH_STRATEGY,
    PBKDF2_STRATEGY,
    bcrypt_kdf_strategy,
    hash_digest_strategy,
    pbkdf2_strategy,
)

logger = logging.getLogger(__name__)

BUILTIN_STRATEGIES: dict[str, HashStrategy] = {
    PBKDF2_STRATEGY: pbkdf2_strategy,
    HASH_STRATEGY: hash_digest_strategy,
    BCRYPT_KDF_STRATEGY: bcrypt_kdf_strategy,
}


class StrategyRegistry:
    """Map strategy names to hashing callables.

    Registrations are append-only: a name can be bound once and is never
    removed, so records serialized with a strategy name keep resolving to the
    same function for the life of the registry.
    """

    def __init__(self, *, include_builtins: bool = True) -> None:
        self._strategies: dict[str, HashStrategy] = {}
        if include_builtins:
            self._strategies.update(BUILTIN_STRATEGIES)

    def add_strategy(self, name: str, fn: HashStrategy | None = None) -> None:
        """Register fn under name, rejecting duplicates and non-callables."""

        if not isinstance(name, str) or not name or RECORD_DELIMITER in name:
            raise StrategyError(
                f'Expected first argument "name" to be a non-empty string '
                f'without "{RECORD_DELIMITER}", got {name!r}'
            )
        if name in self._strategies:
            raise StrategyError(f'Strategy "{name}" already exists')
        if not callable(fn):
            raise StrategyError('Expected second argument "fn" to be a function')

        self._strategies[name] = fn
        logger.info("strategy_registered name=%s", name)

    def get(self, name: str) -> HashStrategy:
        """Return the strategy registered under name."""

        try:
            return self._strategies[name]
        except KeyError:
            raise StrategyError(f'Unknown strategy "{name}"') from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies
