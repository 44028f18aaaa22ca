"""DTOs and request schemas for the Identity app."""
from dataclasses import dataclass
from typing import Optional

from apps.core.schemas import CamelSchema
from .models import EmployeeRole


@dataclass(frozen=True)
class AuthIdentity:
    """The authenticated caller, resolved fresh from the database on every request."""
    id: int
    name: str
    email: str
    role: str

    def as_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
        }


# Fields are optional at the schema level so that missing values are
# reported by the services as 400s with a readable message.

class RegisterIn(CamelSchema):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[EmployeeRole] = None


class LoginIn(CamelSchema):
    email: Optional[str] = None
    password: Optional[str] = None


class EmployeeIn(CamelSchema):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[EmployeeRole] = None
    password: Optional[str] = None


class EmployeeUpdate(CamelSchema):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[EmployeeRole] = None
    password: Optional[str] = None
