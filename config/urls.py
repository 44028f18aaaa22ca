"""
URL configuration for the task manager project.
"""
from django.contrib import admin
from django.urls import path, re_path
from ninja import NinjaAPI

from apps.core.handlers import register_exception_handlers, route_not_found

api = NinjaAPI(
    title="Task Manager API",
    version="1.0.0",
    description="Role-based employee task management API",
    docs_url="/docs",
)

register_exception_handlers(api)

from apps.identity.api import router as auth_router, employees_router
from apps.tasks.api import router as tasks_router
from apps.dashboard.api import router as dashboard_router

api.add_router("/auth", auth_router)
api.add_router("/tasks", tasks_router)
api.add_router("/employees", employees_router)
api.add_router("/dashboard", dashboard_router)


@api.get("/health", auth=None, tags=["Health"])
def health(request):
    return {"status": "OK", "message": "Server is running"}


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
    # Anything left unmatched gets the JSON 404
    re_path(r'^', route_not_found),
]
