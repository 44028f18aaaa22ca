from django.db import models


class TaskStatus(models.TextChoices):
    TODO = 'TODO', 'To Do'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    DONE = 'DONE', 'Done'


class Task(models.Model):
    """
    A unit of work assigned to exactly one employee.

    Deleted together with its employee (ON DELETE CASCADE).
    """
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.TODO
    )
    due_date = models.DateField(null=True, blank=True)
    employee = models.ForeignKey(
        'identity.Employee',
        on_delete=models.CASCADE,
        related_name='tasks',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['status'], name='tasks_task_status_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.status})"
