"""Password hashing helpers for admin accounts."""

from functools import lru_cache

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    """Hash a plaintext password for storage.

    Args:
        password: Plaintext password

    Returns:
        Salted hash in werkzeug's ``method$salt$hash`` format
    """
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Constant-time comparison of a plaintext password against a stored hash."""
    return check_password_hash(password_hash, password)


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """Hash checked against when the username is unknown.

    Keeps the unknown-user path as slow as the wrong-password path.
    """
    return generate_password_hash("storefront-admin-placeholder")
