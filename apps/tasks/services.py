"""
Task services.

Listing applies the visibility filter: callers whose role lacks
TASKS_VIEW_ALL only ever see their own tasks, whatever employee filter
they ask for.
"""
import logging
from typing import Optional

from django.db.models import QuerySet

from apps.core.errors import NotFound, ValidationError
from apps.identity.dtos import AuthIdentity
from apps.identity.models import Employee
from apps.identity.permissions import can_view_all_tasks
from .dtos import TaskIn
from .models import Task, TaskStatus

logger = logging.getLogger(__name__)


def owner_to_dict(employee: Employee, include_role: bool = True) -> dict:
    data = {
        'id': employee.id,
        'name': employee.name,
        'email': employee.email,
    }
    if include_role:
        data['role'] = employee.role
    return data


def task_to_dict(task: Task, include_employee: bool = True) -> dict:
    data = {
        'id': task.id,
        'title': task.title,
        'description': task.description,
        'status': task.status,
        'dueDate': task.due_date,
        'employeeId': task.employee_id,
        'createdAt': task.created_at,
        'updatedAt': task.updated_at,
    }
    if include_employee:
        data['employee'] = owner_to_dict(task.employee)
    return data


def visible_tasks(
    identity: AuthIdentity,
    status: Optional[str] = None,
    employee_id: Optional[int] = None,
) -> QuerySet:
    """
    Build the task query for a caller.

    A USER asking for someone else's tasks silently gets their own.
    """
    if not can_view_all_tasks(identity):
        employee_id = identity.id

    queryset = Task.objects.select_related('employee')
    if status:
        queryset = queryset.filter(status=status)
    if employee_id is not None:
        queryset = queryset.filter(employee_id=employee_id)
    return queryset


def list_tasks(
    identity: AuthIdentity,
    status: Optional[str] = None,
    employee_id: Optional[int] = None,
) -> list[dict]:
    return [task_to_dict(t) for t in visible_tasks(identity, status, employee_id)]


def _get_task(task_id: int) -> Task:
    try:
        return Task.objects.select_related('employee').get(id=task_id)
    except Task.DoesNotExist:
        raise NotFound("Task not found")


def _get_employee(employee_id: int) -> Employee:
    try:
        return Employee.objects.get(id=employee_id)
    except Employee.DoesNotExist:
        raise NotFound("Employee not found")


def get_task(task_id: int) -> dict:
    return task_to_dict(_get_task(task_id))


def create_task(payload: TaskIn) -> dict:
    """
    Create a task for an existing employee.

    Any authenticated caller may assign a task to any employee.
    """
    if not payload.title or not payload.employee_id:
        raise ValidationError("Title and Employee ID are required")

    employee = _get_employee(payload.employee_id)

    task = Task.objects.create(
        title=payload.title,
        description=payload.description or None,
        status=payload.status or TaskStatus.TODO,
        due_date=payload.due_date,
        employee=employee,
    )
    logger.info(f"Created task {task.id} for employee {employee.id}")
    return task_to_dict(task)


def update_task(task_id: int, payload: TaskIn) -> dict:
    """
    Partial update. `dueDate: null` clears the due date; an explicit null
    title or employee is rejected.
    """
    task = _get_task(task_id)
    data = payload.dict(exclude_unset=True)

    if 'title' in data and not data['title']:
        raise ValidationError("Title cannot be empty")
    if 'status' in data and data['status'] is None:
        raise ValidationError("Status cannot be empty")
    if 'employee_id' in data:
        if not data['employee_id']:
            raise ValidationError("Employee ID cannot be empty")
        task.employee = _get_employee(data['employee_id'])

    for field in ('title', 'description', 'status', 'due_date'):
        if field in data:
            setattr(task, field, data[field])

    task.save()
    logger.info(f"Updated task {task.id}: {sorted(data)}")
    return task_to_dict(task)


def delete_task(task_id: int) -> None:
    deleted, _ = Task.objects.filter(id=task_id).delete()
    if not deleted:
        raise NotFound("Task not found")
    logger.info(f"Deleted task {task_id}")
