from passlib.context import CryptContext
from passlib.exc import UnknownHashError

# PBKDF2 has no 72-byte input limit, unlike bcrypt.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext attempt against a stored hash. Argument order is (attempt, stored)."""
    if password is None or not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except (UnknownHashError, ValueError):
        return False
