"""Services for the Identity app: registration, login and employee management."""
import logging
from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import Count

from apps.core.errors import Conflict, NotFound, Unauthenticated, ValidationError
from apps.tasks.services import task_to_dict
from .dtos import AuthIdentity, EmployeeIn, EmployeeUpdate, LoginIn, RegisterIn
from .jwt_auth import issue_token
from .models import Employee, EmployeeRole

logger = logging.getLogger(__name__)


# =============================================================================
# Serialization
# =============================================================================

def public_profile(employee: Employee) -> dict:
    return {
        'id': employee.id,
        'name': employee.name,
        'email': employee.email,
        'role': employee.role,
    }


def employee_to_dict(employee: Employee, task_count: Optional[int] = None) -> dict:
    data = public_profile(employee)
    data['createdAt'] = employee.created_at
    data['updatedAt'] = employee.updated_at
    if task_count is not None:
        data['taskCount'] = task_count
    return data


def _auth_payload(employee: Employee) -> dict:
    return {
        'token': issue_token(employee.id),
        'user': public_profile(employee),
    }


def _save_unique(employee: Employee) -> None:
    """Save, mapping a lost race on the email unique constraint to Conflict."""
    try:
        with transaction.atomic():
            employee.save()
    except IntegrityError:
        raise Conflict("Email already exists")


def _email_taken(email: str, exclude_id: Optional[int] = None) -> bool:
    queryset = Employee.objects.filter(email=email)
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)
    return queryset.exists()


# =============================================================================
# Authentication
# =============================================================================

def register(payload: RegisterIn) -> dict:
    """
    Create an employee account and log it in.

    Returns {token, user}.
    """
    if not payload.name or not payload.email or not payload.password:
        raise ValidationError("Name, email and password are required")

    if _email_taken(payload.email):
        raise Conflict("Email already exists")

    employee = Employee(
        name=payload.name,
        email=payload.email,
        role=payload.role or EmployeeRole.USER,
    )
    employee.set_password(payload.password)
    _save_unique(employee)

    logger.info(f"Registered employee {employee.id} ({employee.role})")
    return _auth_payload(employee)


def login(payload: LoginIn) -> dict:
    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required")

    employee = Employee.objects.filter(email=payload.email).first()
    if employee is None or not employee.check_password(payload.password):
        logger.info("Failed login attempt")
        raise Unauthenticated("Invalid email or password")

    logger.info(f"Employee {employee.id} logged in")
    return _auth_payload(employee)


def get_profile(identity: AuthIdentity) -> dict:
    return identity.as_dict()


# =============================================================================
# Employee management
# =============================================================================

def list_employees() -> list[dict]:
    employees = Employee.objects.annotate(task_count=Count('tasks'))
    return [employee_to_dict(e, task_count=e.task_count) for e in employees]


def get_employee(employee_id: int) -> dict:
    try:
        employee = Employee.objects.get(id=employee_id)
    except Employee.DoesNotExist:
        raise NotFound("Employee not found")

    tasks = list(employee.tasks.order_by('-created_at', '-id'))
    data = employee_to_dict(employee, task_count=len(tasks))
    data['tasks'] = [task_to_dict(t, include_employee=False) for t in tasks]
    return data


def create_employee(payload: EmployeeIn) -> dict:
    if not payload.name or not payload.email:
        raise ValidationError("Name and Email are required")

    if _email_taken(payload.email):
        raise Conflict("Email already exists")

    employee = Employee(
        name=payload.name,
        email=payload.email,
        role=payload.role or EmployeeRole.USER,
    )
    if payload.password:
        employee.set_password(payload.password)
    _save_unique(employee)

    logger.info(f"Created employee {employee.id}")
    return employee_to_dict(employee)


def update_employee(employee_id: int, payload: EmployeeUpdate) -> dict:
    """
    Partial update: only fields present in the request are changed.
    """
    try:
        employee = Employee.objects.get(id=employee_id)
    except Employee.DoesNotExist:
        raise NotFound("Employee not found")

    data = payload.dict(exclude_unset=True)

    for field in ('name', 'email'):
        if field in data and not data[field]:
            raise ValidationError(f"{field.capitalize()} cannot be empty")

    email = data.get('email')
    if email and email != employee.email and _email_taken(email, exclude_id=employee.id):
        raise Conflict("Email already exists")

    if 'name' in data:
        employee.name = data['name']
    if 'email' in data:
        employee.email = data['email']
    if data.get('role') is not None:
        employee.role = data['role']
    if data.get('password'):
        employee.set_password(data['password'])

    _save_unique(employee)

    logger.info(f"Updated employee {employee.id}: {sorted(k for k in data if k != 'password')}")
    return employee_to_dict(employee)


def delete_employee(employee_id: int) -> None:
    """Delete an employee; their tasks go with them (ON DELETE CASCADE)."""
    deleted, _ = Employee.objects.filter(id=employee_id).delete()
    if not deleted:
        raise NotFound("Employee not found")
    logger.info(f"Deleted employee {employee_id}")
