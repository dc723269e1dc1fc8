"""
Salted PBKDF2 password hashing

Hashes are stored as ``<salt hex>:<digest hex>``.
"""

import hashlib
import hmac
import logging
import secrets
from typing import Optional

from qanyare.infrastructure.utilities.constants import SecuritySettings

logger = logging.getLogger(__name__)


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        SecuritySettings.HASH_ALGORITHM,
        password.encode("utf-8"),
        bytes.fromhex(salt),
        SecuritySettings.HASH_ITERATIONS,
    ).hex()


def hash_password(password: str, salt: Optional[str] = None) -> str:
    salt = salt or secrets.token_hex(SecuritySettings.SALT_BYTES)
    return f"{salt}:{_derive(password, salt)}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash; malformed hashes never match"""
    try:
        salt, stored = password_hash.split(":", 1)
        check = _derive(password, salt)
    except ValueError:
        logger.warning("Malformed password hash encountered")
        return False
    return hmac.compare_digest(check, stored)
