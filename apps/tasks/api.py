"""
Task API endpoints.

All routes require a bearer token. Listing is scoped by role; reads,
writes and deletes by id are open to any authenticated employee.
"""
from typing import Optional

from django.http import HttpRequest
from ninja import Query, Router

from apps.core.responses import success_response
from apps.identity.security import JWTBearer
from .dtos import TaskIn
from .models import TaskStatus
from . import services

router = Router(tags=["Tasks"], auth=JWTBearer())


@router.get("")
def list_tasks(
    request: HttpRequest,
    status: Optional[TaskStatus] = None,
    employee_id: Optional[int] = Query(None, alias="employeeId"),
):
    """
    List tasks, newest first.

    Query Parameters:
    - status: TODO, IN_PROGRESS or DONE
    - employeeId: only tasks of this employee (ignored for USER callers,
      who always get their own tasks)
    """
    tasks = services.list_tasks(request.auth, status=status, employee_id=employee_id)
    return success_response(tasks)


@router.get("/{int:task_id}")
def get_task(request: HttpRequest, task_id: int):
    return success_response(services.get_task(task_id))


@router.post("")
def create_task(request: HttpRequest, payload: TaskIn):
    task = services.create_task(payload)
    return success_response(task, message="Task created successfully", status=201)


@router.put("/{int:task_id}")
def update_task(request: HttpRequest, task_id: int, payload: TaskIn):
    task = services.update_task(task_id, payload)
    return success_response(task, message="Task updated successfully")


@router.delete("/{int:task_id}")
def delete_task(request: HttpRequest, task_id: int):
    services.delete_task(task_id)
    return success_response(message="Task deleted successfully")
