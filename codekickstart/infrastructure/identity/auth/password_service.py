"""Password hashing and verification service."""

from pwdlib import PasswordHash

from codekickstart.config import get_settings

password_hash = PasswordHash.recommended()

# Verified against when the email is unknown, so both failure paths cost one hash check
DUMMY_HASH = password_hash.hash("codekickstart-dummy-password")


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper."""
    return password_hash.hash(plain_password + get_settings().PASSWORD_PEPPER)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a peppered hash."""
    return password_hash.verify(plain_password + get_settings().PASSWORD_PEPPER, hashed_password)


def get_dummy_hash() -> str:
    return DUMMY_HASH
