from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class EmployeeRole(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrator'
    MANAGER = 'MANAGER', 'Manager'
    USER = 'USER', 'User'


class Employee(models.Model):
    """
    An employee account: identity, credentials and role.

    The password is nullable because employees created through the
    management endpoints may not have one yet; such accounts cannot log in.
    """
    name = models.CharField(max_length=255)
    # Uniqueness enforced by the database, not just the service pre-check
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=128, null=True, blank=True)
    role = models.CharField(
        max_length=20,
        choices=EmployeeRole.choices,
        default=EmployeeRole.USER
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.name} <{self.email}>"

    def set_password(self, raw_password: str) -> None:
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        if not self.password:
            return False
        return check_password(raw_password, self.password)
