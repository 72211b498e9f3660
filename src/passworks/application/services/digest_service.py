"""Digest computation and verification over password records."""

from __future__ import annotations

import asyncio
import hmac
import inspect
import logging
from dataclasses import dataclass
from enum import StrEnum

from passworks.application.ports.hash_strategy_port import StrategyContext
from passworks.application.services.strategy_registry import StrategyRegistry
from passworks.domain.errors import StrategyError
from passworks.domain.password_record import PasswordRecord

logger = logging.getLogger(__name__)


class VerificationOutcome(StrEnum):
    """Supported verification outcomes."""

    MATCH = "match"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class VerificationResult:
    """Verification result model."""

    outcome: VerificationOutcome
    strategy: str

    @property
    def matched(self) -> bool:
        return self.outcome is VerificationOutcome.MATCH


class DigestService:
    """Run the record's strategy for a secret and compare digests."""

    def __init__(self, *, registry: StrategyRegistry) -> None:
        self._registry = registry

    async def compute(self, record: PasswordRecord, secret: str) -> str:
        """Return the digest of secret under record parameters without storing it."""

        strategy = self._registry.get(record.strategy)
        context = _context_for(record)

        if inspect.iscoroutinefunction(strategy):
            result = await strategy(secret, context)
        else:
            result = await asyncio.to_thread(strategy, secret, context)
            if inspect.isawaitable(result):
                result = await result

        return _checked_digest(result, strategy_name=record.strategy)

    def compute_sync(self, record: PasswordRecord, secret: str) -> str:
        """Blocking variant of compute for synchronous strategies."""

        strategy = self._registry.get(record.strategy)
        result = strategy(secret, _context_for(record))
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise StrategyError(
                f'Strategy "{record.strategy}" is asynchronous; use digest() instead'
            )
        return _checked_digest(result, strategy_name=record.strategy)

    async def digest(self, record: PasswordRecord, secret: str) -> str:
        """Compute the digest of secret and seal record with it."""

        logger.debug("password_digest_started strategy=%s", record.strategy)
        record.hash = await self.compute(record, secret)
        logger.debug("password_digest_completed strategy=%s", record.strategy)
        return record.hash

    async def verify(self, record: PasswordRecord, candidate: str) -> VerificationResult:
        """Compare the candidate digest with the stored hash without mutating record."""

        candidate_hash = await self.compute(record, candidate)
        stored_hash = record.hash or ""
        is_match = bool(stored_hash) and hmac.compare_digest(
            candidate_hash.encode("utf-8"),
            stored_hash.encode("utf-8"),
        )
        if not is_match:
            logger.info("password_verification_mismatch strategy=%s", record.strategy)
            return VerificationResult(
                outcome=VerificationOutcome.MISMATCH,
                strategy=record.strategy,
            )
        return VerificationResult(outcome=VerificationOutcome.MATCH, strategy=record.strategy)


def _context_for(record: PasswordRecord) -> StrategyContext:
    return StrategyContext(
        algorithm=record.algorithm,
        iterations=record.iterations,
        key_length=record.key_length,
        salt=record.salt,
    )


def _checked_digest(result: object, *, strategy_name: str) -> str:
    if not isinstance(result, str):
        raise StrategyError(
            f'Strategy "{strategy_name}" returned {type(result).__name__}, expected str'
        )
    return result
