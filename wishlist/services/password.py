"""Password hashing for stored user credentials."""

from passlib.context import CryptContext
from passlib.exc import UnknownHashError


class PasswordHasher:
    """Salted one-way hashing backed by bcrypt.

    Every call to :meth:`hash` draws a fresh salt, so hashing the same
    password twice gives two different strings.
    """

    def __init__(self, context: CryptContext | None = None):
        self.context = context or CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Verify a password against its hash, failing closed on bad hashes."""
        if not password_hash:
            return False
        try:
            return self.context.verify(password, password_hash)
        except (UnknownHashError, ValueError, TypeError):
            return False

    def dummy_verify(self) -> bool:
        """Spend the same time as a real verify when there is no hash to check."""
        return self.context.dummy_verify()
