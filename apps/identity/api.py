"""
Identity API endpoints with JWT bearer authentication.

Provides registration, login and the current-user profile, plus employee
management. Tokens are returned in the response body and presented back in
the `Authorization: Bearer <token>` header.
"""
from django.http import HttpRequest
from ninja import Router

from apps.core.responses import success_response
from .decorators import admin_required, manager_or_admin_required
from .dtos import EmployeeIn, EmployeeUpdate, LoginIn, RegisterIn
from .security import JWTBearer
from . import services

router = Router(tags=["Auth"])
employees_router = Router(tags=["Employees"], auth=JWTBearer())


# =============================================================================
# Auth Endpoints
# =============================================================================

@router.post("/register")
def register(request: HttpRequest, payload: RegisterIn):
    """
    Register a new employee and return a token for it.
    """
    result = services.register(payload)
    return success_response(result, message="Registration successful", status=201)


@router.post("/login")
def login(request: HttpRequest, payload: LoginIn):
    """
    Authenticate with email and password.
    """
    result = services.login(payload)
    return success_response(result, message="Login successful")


@router.get("/me", auth=JWTBearer())
def get_me(request: HttpRequest):
    """
    Get current authenticated employee's profile.
    """
    return success_response(services.get_profile(request.auth))


# =============================================================================
# Employee Management Endpoints
# =============================================================================

@employees_router.get("")
def list_employees(request: HttpRequest):
    return success_response(services.list_employees())


@employees_router.get("/{int:employee_id}")
def get_employee(request: HttpRequest, employee_id: int):
    return success_response(services.get_employee(employee_id))


@employees_router.post("")
@manager_or_admin_required
def create_employee(request: HttpRequest, payload: EmployeeIn):
    """
    Create an employee. Requires MANAGER or ADMIN.
    """
    employee = services.create_employee(payload)
    return success_response(employee, message="Employee created successfully", status=201)


@employees_router.put("/{int:employee_id}")
@manager_or_admin_required
def update_employee(request: HttpRequest, employee_id: int, payload: EmployeeUpdate):
    """
    Update an employee. Only fields present in the body change.

    Requires MANAGER or ADMIN.
    """
    employee = services.update_employee(employee_id, payload)
    return success_response(employee, message="Employee updated successfully")


@employees_router.delete("/{int:employee_id}")
@admin_required
def delete_employee(request: HttpRequest, employee_id: int):
    """
    Delete an employee together with all of their tasks. Requires ADMIN.
    """
    services.delete_employee(employee_id)
    return success_response(message="Employee deleted successfully")
