from datetime import date
from typing import Optional

from pydantic import field_validator

from apps.core.schemas import CamelSchema
from .models import TaskStatus


class TaskIn(CamelSchema):
    """
    Body for creating and updating tasks.

    On update only the fields present in the body are applied.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[date] = None
    employee_id: Optional[int] = None

    @field_validator('due_date', 'employee_id', mode='before')
    @classmethod
    def blank_as_none(cls, value):
        # Form submissions send "" for untouched inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value
