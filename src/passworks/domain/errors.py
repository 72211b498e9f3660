"""Error kinds raised by password hashing and verification."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable failure categories shared by all passworks errors."""

    CONFIGURATION = "configuration"
    STRATEGY = "strategy"
    PASSWORD_MISMATCH = "password_mismatch"
    RECORD_FORMAT = "record_format"


class PassworksError(Exception):
    """Base class for errors raised by passworks itself."""

    kind: ErrorKind


class ConfigurationError(PassworksError, TypeError):
    """Raised when a password is created before configuration was initialized."""

    kind = ErrorKind.CONFIGURATION


class StrategyError(PassworksError, ValueError):
    """Raised for unknown, duplicate or malformed hashing strategies."""

    kind = ErrorKind.STRATEGY


class PasswordError(PassworksError, ValueError):
    """Raised when a candidate secret does not reproduce the stored hash."""

    kind = ErrorKind.PASSWORD_MISMATCH


class RecordFormatError(PassworksError, ValueError):
    """Raised when a serialized password record cannot be parsed."""

    kind = ErrorKind.RECORD_FORMAT
