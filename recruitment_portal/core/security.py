import secrets
import uuid

from passlib.context import CryptContext

from recruitment_portal.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # stored value is not a recognised hash (e.g. a plaintext record)
        return False


def prepare_password(password: str, hashing: bool | None = None) -> str:
    """Return the value to persist for ``password``.

    Plaintext unless hashing is enabled, either explicitly or through
    ``PASSWORD_HASHING``.
    """
    if hashing is None:
        hashing = settings.PASSWORD_HASHING
    return hash_password(password) if hashing else password


def password_matches(plain_password: str, stored_password: str, hashing: bool | None = None) -> bool:
    if hashing is None:
        hashing = settings.PASSWORD_HASHING
    if hashing:
        return verify_password(plain_password, stored_password)
    return secrets.compare_digest(plain_password.encode("utf-8"), stored_password.encode("utf-8"))


def generate_id() -> str:
    return uuid.uuid4().hex
