from functools import wraps
from typing import Callable

from django.http import HttpRequest

from .permissions import require_admin, require_manager_or_admin


def guarded_by(guard: Callable):
    """
    Decorator applying a role guard to a Django Ninja endpoint.

    The endpoint's router must authenticate with JWTBearer so that
    `request.auth` holds the caller's AuthIdentity.

    Usage:
        @router.delete("/{employee_id}")
        @guarded_by(require_admin)
        def my_view(request, employee_id: int):
            ...
    """
    def decorator(view_func: Callable):
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args, **kwargs):
            guard(getattr(request, 'auth', None))
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator


admin_required = guarded_by(require_admin)
manager_or_admin_required = guarded_by(require_manager_or_admin)
