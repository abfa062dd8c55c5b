"""
Password hashing helpers.

Thin wrappers over bcrypt; the work factor comes from settings.
"""

import bcrypt

# bcrypt only reads this many bytes of input and rejects anything longer
MAX_PASSWORD_BYTES = 72


def check_password_length(password: str) -> str:
    """
    Reject passwords bcrypt cannot hash.

    Raises:
        ValueError: If the UTF-8 encoding is longer than MAX_PASSWORD_BYTES
    """
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


def hash_password(password: str, work_factor: int) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password
        work_factor: bcrypt cost (log2 rounds)

    Returns:
        The bcrypt hash as a string
    """
    salt = bcrypt.gensalt(rounds=work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash, or a password bcrypt would refuse
        return False
