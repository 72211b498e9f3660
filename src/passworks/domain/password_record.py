"""Delimited string codec for persisted password records."""

from __future__ import annotations

from dataclasses import dataclass, field

from passworks.domain.errors import RecordFormatError

RECORD_DELIMITER = ":"
RECORD_FIELD_COUNT = 6


@dataclass
class PasswordRecord:
    """Field values of one hashed password in serialization order.

    Records are mutable and compare by value, so they are unhashable; `salt` and
    `hash` are left out of `repr`.
    """

    strategy: str
    algorithm: str
    iterations: int | None
    key_length: int | None
    salt: str = field(repr=False)
    hash: str | None = field(default=None, repr=False)

    @property
    def is_sealed(self) -> bool:
        return bool(self.hash)


def serialize_record(record: PasswordRecord) -> str:
    """Render record as `strategy:algorithm:iterations:key_length:salt:hash`."""

    fields = (
        record.strategy,
        record.algorithm,
        record.iterations,
        record.key_length,
        record.salt,
        record.hash,
    )
    return RECORD_DELIMITER.join("" if value is None else str(value) for value in fields)


def parse_record(serialized: str) -> PasswordRecord:
    """Parse one serialized record, restoring every field verbatim."""

    parts = serialized.strip("\r\n").split(RECORD_DELIMITER)
    if len(parts) > RECORD_FIELD_COUNT:
        raise RecordFormatError(
            f"Expected at most {RECORD_FIELD_COUNT} fields, got {len(parts)}"
        )
    parts.extend([""] * (RECORD_FIELD_COUNT - len(parts)))
    strategy, algorithm, iterations, key_length, salt, password_hash = parts

    return PasswordRecord(
        strategy=strategy,
        algorithm=algorithm,
        iterations=_parse_optional_int(iterations, field_name="iterations"),
        key_length=_parse_optional_int(key_length, field_name="key_length"),
        salt=salt,
        hash=password_hash or None,
    )


def _parse_optional_int(raw: str, *, field_name: str) -> int | None:
    if raw == "":
        return None
    if not (raw.isascii() and raw.isdigit()):
        raise RecordFormatError(f"Field {field_name} must be a non-negative integer, got {raw!r}")
    return int(raw)
