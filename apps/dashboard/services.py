"""
Dashboard statistics.
Provides task counts per status, employee count, completion rate and the
most recent tasks.
"""
from django.db.models import Count, Q

from apps.identity.models import Employee
from apps.tasks.models import Task, TaskStatus
from apps.tasks.services import owner_to_dict, task_to_dict

RECENT_TASKS_LIMIT = 5


def completion_rate(total: int, completed: int) -> int:
    """
    Percentage of completed tasks, rounded half up to an integer.

    Returns 0 when there are no tasks.
    """
    if total <= 0:
        return 0
    # Integer form of floor(completed / total * 100 + 0.5)
    return (200 * completed + total) // (2 * total)


def get_recent_tasks(limit: int = RECENT_TASKS_LIMIT) -> list[dict]:
    tasks = Task.objects.select_related('employee').order_by('-created_at', '-id')[:limit]
    recent = []
    for task in tasks:
        data = task_to_dict(task, include_employee=False)
        data['employee'] = owner_to_dict(task.employee, include_role=False)
        recent.append(data)
    return recent


def get_dashboard_stats() -> dict:
    counts = Task.objects.aggregate(
        total=Count('id'),
        completed=Count('id', filter=Q(status=TaskStatus.DONE)),
        todo=Count('id', filter=Q(status=TaskStatus.TODO)),
        in_progress=Count('id', filter=Q(status=TaskStatus.IN_PROGRESS)),
    )

    return {
        'totalTasks': counts['total'],
        'completedTasks': counts['completed'],
        'todoTasks': counts['todo'],
        'inProgressTasks': counts['in_progress'],
        'totalEmployees': Employee.objects.count(),
        'completionRate': completion_rate(counts['total'], counts['completed']),
        'recentTasks': get_recent_tasks(),
    }
