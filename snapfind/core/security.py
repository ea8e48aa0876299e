# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError, DecodeError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """Hash a plain password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True when the plain password matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed hash in the users table
        return False


def create_jwt_token(payload: Dict[str, Any], expires_in_seconds: Optional[int] = None) -> str:
    """
    Create a signed access token for a session

    Args:
        payload: Token claims (``sub`` carries the owner user id)
        expires_in_seconds: Lifetime override; defaults to the configured
            access token lifetime

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    issued_at = int(time.time())
    lifetime = expires_in_seconds
    if lifetime is None:
        lifetime = settings.access_token_expire_minutes * 60

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token

    Raises:
        ValueError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except (InvalidTokenError, DecodeError) as e:
        raise ValueError(f"Invalid token: {str(e)}")
