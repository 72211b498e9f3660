"""Port for pluggable password hashing strategies."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class StrategyContext:
    """Record parameters visible to a strategy while it hashes one secret."""

    algorithm: str
    iterations: int | None
    key_length: int | None
    salt: str


class HashStrategy(Protocol):
    """Hashing function contract.

    Implementations receive the plaintext secret and the record parameters and
    return the hex digest, either directly or as an awaitable.
    """

    def __call__(self, secret: str, context: StrategyContext) -> str | Awaitable[str]:
        """Hash secret using context parameters."""
