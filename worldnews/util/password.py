"""Password hashing utilities."""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain-text password
        rounds: bcrypt work factor

    Returns:
        Encoded bcrypt hash
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash.

    Args:
        password: Plain-text password
        password_hash: Stored hash

    Returns:
        True if the password matches
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
