"""Password hashing and access token primitives."""

from .passwords import PasswordHasher
from .tokens import TokenData, TokenIssuer

__all__ = ["PasswordHasher", "TokenData", "TokenIssuer"]
