"""
Password hashing service.

Bcrypt hashing used to store employee passwords and to check a submitted
password against the stored hash.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)


class Hashing:
    """Bcrypt password hashing utility."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize with bcrypt rounds (cost factor)."""
        self.rounds = rounds

    def hash(self, plain_text: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(plain_text.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def check_hash(self, plain_text: str, stored_hash: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(plain_text.encode("utf-8"), stored_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Password verification failed: {e}")
            return False
