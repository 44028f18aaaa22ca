"""
Authorization gate for protected routes.

`JWTBearer` is attached to every protected router. It verifies the bearer
token, re-resolves the employee on every request and hands django-ninja an
`AuthIdentity`, which becomes `request.auth` for guards and handlers.
"""
import logging

from django.http import HttpRequest
from ninja.security import HttpBearer

from apps.core.errors import Unauthenticated
from .dtos import AuthIdentity
from .jwt_auth import InvalidToken, verify_token
from .models import Employee

logger = logging.getLogger(__name__)


def resolve_identity(token: str) -> AuthIdentity:
    """
    Turn a raw bearer token into the current identity of its employee.

    Malformed, expired and tampered tokens all fail with the same message.
    """
    try:
        employee_id = verify_token(token)
    except InvalidToken as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise Unauthenticated("Invalid or expired token")

    employee = (
        Employee.objects
        .filter(id=employee_id)
        .values('id', 'name', 'email', 'role')
        .first()
    )
    if employee is None:
        logger.warning(f"Token subject {employee_id} no longer exists")
        raise Unauthenticated("User not found")

    return AuthIdentity(**employee)


class JWTBearer(HttpBearer):
    """
    Requests without an `Authorization: Bearer` header never reach
    `authenticate`; django-ninja raises AuthenticationError for them.
    """

    def authenticate(self, request: HttpRequest, token: str) -> AuthIdentity:
        return resolve_identity(token)
