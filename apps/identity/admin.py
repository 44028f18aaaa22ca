from django.contrib import admin
from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'role', 'created_at']
    list_filter = ['role']
    search_fields = ['name', 'email']
    exclude = ['password']
