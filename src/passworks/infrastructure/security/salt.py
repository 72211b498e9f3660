"""Random salt generation for new password records."""

from __future__ import annotations

import secrets


def generate_salt(key_length: int) -> str:
    """Return a hex salt of `key_length` random bytes (`2 * key_length` characters).

    `key_length` is expected to be validated already by `PassworksConfig`.
    """

    return secrets.token_hex(key_length)
