"""Credential store: bcrypt password hashing and verification.

The cost factor is read once from BCRYPT_ROUNDS at import time and applies
to the whole process.
"""

import logging
import os

import bcrypt

from domain.model.errors import InternalError, ValidationError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = max(4, int(os.getenv("BCRYPT_ROUNDS", "12")))

# bcrypt refuses longer inputs
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    if password_too_long(password):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check password against a stored bcrypt hash.

    A mismatch returns False. A hash bcrypt cannot parse is a storage
    problem, not a wrong password, so it raises InternalError.
    """
    if password_too_long(password):
        # Registration never accepts such a password, so it cannot match
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError) as e:
        logger.error("Stored password hash could not be verified", extra={"error": str(e)})
        raise InternalError("Password verification failed") from e
