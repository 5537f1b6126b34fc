"""Password transforms applied before a user record is stored.

Two schemes exist:

* ``pbkdf2_sha256`` (default): salted one-way hash via passlib.
* ``legacy``: the historical deterministic transform. It is unsalted and
  trivially invertible, so it is only meant for reproducing old data and
  must not be used for new deployments.
"""

from passlib.context import CryptContext

LEGACY_SCHEME = "legacy"
DEFAULT_SCHEME = "pbkdf2_sha256"


def legacy_obfuscate(password: str) -> str:
    """Deterministic, unsalted transform kept for compatibility.

    Security defect: equal passwords give equal outputs and the plaintext can
    be recovered by reversing the string.
    """
    return f"hashed_{password[::-1].upper()}_secure"


class PasswordHasher:
    """Hash and verify passwords with the configured scheme."""

    def __init__(self, scheme: str = DEFAULT_SCHEME):
        self.scheme = scheme
        if scheme == LEGACY_SCHEME:
            self._context = None
        else:
            try:
                self._context = CryptContext(schemes=[scheme], deprecated="auto")
            except KeyError:
                raise ValueError(f"Unknown password scheme '{scheme}'")

    def hash(self, password: str) -> str:
        if self._context is None:
            return legacy_obfuscate(password)
        return self._context.hash(password)

    def verify(self, password: str, stored: str) -> bool:
        if self._context is None:
            return legacy_obfuscate(password) == stored
        return self._context.verify(password, stored)


__all__ = ["LEGACY_SCHEME", "DEFAULT_SCHEME", "legacy_obfuscate", "PasswordHasher"]
