from typing import Optional

import bcrypt

from staff_api.core.config import get_settings

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or get_settings().BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Return True when ``password`` matches the stored bcrypt ``hashed``.

    A malformed stored hash never matches.
    """
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        return False
