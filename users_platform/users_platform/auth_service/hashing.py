from passlib.context import CryptContext

from .config import settings


class HashService:
    """One-way hashing for passwords and refresh tokens."""

    def __init__(self, scheme: str = settings.PASSWORD_HASH_SCHEME):
        self.pwd_context = CryptContext(schemes=[scheme], deprecated="auto")

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def compare_passwords(self, plain_password: str, hashed_password: str) -> bool:
        return self.compare_hash(plain_password, hashed_password)

    def hash_string(self, value: str) -> str:
        return self.pwd_context.hash(value)

    def compare_hash(self, value: str, hashed_value: str) -> bool:
        # an unrecognised stored hash counts as a mismatch
        try:
            return self.pwd_context.verify(value, hashed_value)
        except ValueError:
            return False
