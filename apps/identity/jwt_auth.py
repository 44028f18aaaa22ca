"""
JWT token service.

Issues and verifies stateless access tokens binding an employee id.
Tokens carry `sub` (employee id), `iat` and `exp`; nothing is stored
server-side.
"""
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from django.conf import settings


JWT_ALGORITHM = 'HS256'


class InvalidToken(Exception):
    """Raised for malformed, tampered or expired tokens alike."""


def get_token_lifetime() -> timedelta:
    return timedelta(hours=settings.JWT_EXPIRATION_HOURS)


def issue_token(employee_id: int, lifetime: Optional[timedelta] = None) -> str:
    """
    Create a signed access token for an employee.

    Expires after JWT_EXPIRATION_HOURS unless `lifetime` is given.
    """
    now = datetime.now(timezone.utc)
    payload = {
        'sub': str(employee_id),
        'iat': now,
        'exp': now + (lifetime if lifetime is not None else get_token_lifetime()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> int:
    """
    Decode and validate a token.

    Returns:
        The employee id the token was issued for.

    Raises:
        InvalidToken: bad signature, malformed token, missing claims,
        non-integer subject or expired token.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            options={'require': ['exp', 'sub']},
        )
    except jwt.InvalidTokenError as e:
        raise InvalidToken(str(e)) from e

    try:
        return int(payload['sub'])
    except (TypeError, ValueError) as e:
        raise InvalidToken("Token subject is not an employee id") from e
