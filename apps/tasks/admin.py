from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'employee', 'status', 'due_date', 'created_at']
    list_filter = ['status']
    search_fields = ['title', 'description', 'employee__name', 'employee__email']
    list_select_related = ['employee']
