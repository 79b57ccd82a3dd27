"""Password hashing."""

from passlib.context import CryptContext


class PasswordHasher:
    """Salted password hashing over a passlib CryptContext.

    deprecated="auto" lets hashes from a retired scheme still verify after
    the configured scheme changes.
    """

    def __init__(self, scheme: str = "pbkdf2_sha256"):
        self.context = CryptContext(schemes=[scheme], deprecated="auto")

    def hash(self, password: str) -> str:
        """Hashes a plain password."""
        return self.context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verifies a plain password against a hashed one."""
        try:
            return self.context.verify(password, hashed_password)
        except ValueError:
            # Stored value is not a hash this context can identify
            return False
