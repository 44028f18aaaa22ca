"""Helpers for building employees and bearer headers in tests."""
from apps.identity.jwt_auth import issue_token
from apps.identity.models import Employee, EmployeeRole

DEFAULT_PASSWORD = 'testpass123'


def make_employee(name='Test User', email=None, role=EmployeeRole.USER, password=DEFAULT_PASSWORD):
    employee = Employee(
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@test.com",
        role=role,
    )
    if password:
        employee.set_password(password)
    employee.save()
    return employee


def auth_header(employee) -> dict:
    """Client kwargs carrying a bearer token for `employee`."""
    return {'HTTP_AUTHORIZATION': f'Bearer {issue_token(employee.id)}'}
