"""
Passwords and bearer tokens

Passwords are stored as bcrypt hashes. API tokens are HS256 JWTs whose
user_id claim names the logged in user.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
import bcrypt
from catalog_admin.config import settings

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Salted bcrypt hash, stored in users.password_hash"""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a password against a stored hash
    A missing or malformed hash never matches
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
    """
    Bearer token for one user

    Usage:
        create_access_token(user.id, email=user.email)
        create_access_token(user.id, expires_delta=timedelta(minutes=5))
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    payload = {**claims, "user_id": user_id, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Claims of a valid token

    Raises:
        JWTError: bad signature, expired, or no user_id claim
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise JWTError(f"Invalid token: {e}")

    if not isinstance(payload.get("user_id"), int):
        raise JWTError("Invalid token: missing user_id")
    return payload
