"""Port for password hashing.

The application layer only needs to hash and verify; which algorithm
does it is an infrastructure decision.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Return a salted hash of ``password``."""

    @abstractmethod
    def verify_password(self, password: str, password_hash: str) -> bool:
        """True when ``password`` matches ``password_hash``."""
