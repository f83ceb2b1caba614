"""bcrypt password hashing.

bcrypt only looks at the first 72 bytes of a secret, so longer passwords are
rejected instead of being silently truncated.
"""

import os

import bcrypt
from protean.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72


def _rounds() -> int:
    return int(os.getenv("BCRYPT_ROUNDS", "12"))


def validate_password(password: str) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError({"password": [f"Password must be at most {MAX_PASSWORD_BYTES} bytes"]})


def hash_password(password: str) -> str:
    validate_password(password)
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=_rounds()))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
