"""Password hashing helpers."""

from werkzeug.security import check_password_hash, generate_password_hash

from app.infrastructure.config.settings import settings


def hash_password(password: str) -> str:
    """
    Hash a plaintext password.

    Args:
        password: Plaintext password

    Returns:
        Salted one-way hash suitable for storage
    """
    return generate_password_hash(password, method=settings.password_hash_method)


def verify_password(password_hash: str, password: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Args:
        password_hash: Stored hash
        password: Plaintext password to check

    Returns:
        True if the password matches
    """
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)
