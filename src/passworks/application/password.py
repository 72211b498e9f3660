"""Password record that hashes, verifies and serializes itself."""

from __future__ import annotations

from typing import Literal, overload

from passworks.application.context import PassworksContext, get_default_context
from passworks.application.services.digest_service import VerificationResult
from passworks.config.settings import PassworksConfig
from passworks.domain.errors import PasswordError
from passworks.domain.password_record import PasswordRecord, parse_record, serialize_record
from passworks.infrastructure.security.salt import generate_salt


class Password(PasswordRecord):
    """One salted, strategy-tagged password hash.

    A fresh instance copies the context configuration (plus any per-instance
    `options`) and draws a new salt; `hash` stays empty until `digest` runs.
    Instances restored with `from_string` keep their stored salt and hash.
    """

    def __init__(
        self,
        options: PassworksConfig | dict[str, object] | None = None,
        *,
        context: PassworksContext | None = None,
    ) -> None:
        self._context = context if context is not None else get_default_context()
        config = self._context.require_config().merged(options)
        super().__init__(
            strategy=config.strategy,
            algorithm=config.algorithm,
            iterations=config.iterations,
            key_length=config.key_length,
            salt=generate_salt(config.key_length),
            hash=None,
        )

    @classmethod
    def from_record(
        cls,
        record: PasswordRecord,
        *,
        context: PassworksContext | None = None,
    ) -> Password:
        """Wrap existing field values without drawing a salt or hashing."""

        password = cls.__new__(cls)
        password._context = context if context is not None else get_default_context()
        PasswordRecord.__init__(
            password,
            strategy=record.strategy,
            algorithm=record.algorithm,
            iterations=record.iterations,
            key_length=record.key_length,
            salt=record.salt,
            hash=record.hash,
        )
        return password

    @classmethod
    def from_string(
        cls,
        serialized: str,
        *,
        context: PassworksContext | None = None,
    ) -> Password:
        """Restore a password from `strategy:algorithm:iterations:key_length:salt:hash`."""

        return cls.from_record(parse_record(serialized), context=context)

    @property
    def context(self) -> PassworksContext:
        return self._context

    @overload
    async def digest(self, secret: str, *, raw: Literal[False] = ...) -> Password: ...

    @overload
    async def digest(self, secret: str, *, raw: Literal[True]) -> str: ...

    async def digest(self, secret: str, *, raw: bool = False) -> Password | str:
        """Hash secret with this record's strategy and store the result.

        Returns the instance itself, or the raw hex digest when `raw` is set.
        """

        password_hash = await self._context.digests.digest(self, secret)
        return password_hash if raw else self

    def digest_sync(self, secret: str) -> str:
        """Blocking digest for synchronous strategies; stores and returns the hash."""

        self.hash = self._context.digests.compute_sync(self, secret)
        return self.hash

    async def verify(self, candidate: str) -> VerificationResult:
        """Report whether candidate reproduces the stored hash."""

        return await self._context.digests.verify(self, candidate)

    async def matches(self, candidate: str) -> Password:
        """Return self when candidate matches, otherwise raise PasswordError."""

        result = await self.verify(candidate)
        if not result.matched:
            raise PasswordError("Password does not match")
        return self

    def needs_rehash(self, config: PassworksConfig | None = None) -> bool:
        """True when record parameters differ from config (default: context config)."""

        target = config if config is not None else self._context.require_config()
        return (
            self.strategy != target.strategy
            or self.algorithm != target.algorithm
            or self.iterations != target.iterations
            or self.key_length != target.key_length
        )

    def to_string(self) -> str:
        return serialize_record(self)

    def __str__(self) -> str:
        return self.to_string()
