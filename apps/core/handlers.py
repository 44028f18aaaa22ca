"""
Exception handlers for the NinjaAPI.

Expected failures (AppError subclasses) map to their own status code.
Anything else is logged with a traceback and reported as a 500 with a
generic error plus the underlying exception text.
"""
import logging

from django.http import HttpRequest
from ninja import NinjaAPI
from ninja.errors import AuthenticationError, HttpError
from ninja.errors import ValidationError as SchemaValidationError

from .errors import AppError
from .responses import error_response

logger = logging.getLogger(__name__)


def register_exception_handlers(api: NinjaAPI) -> None:

    @api.exception_handler(AppError)
    def on_app_error(request: HttpRequest, exc: AppError):
        return error_response(exc.message, status=exc.status_code)

    @api.exception_handler(AuthenticationError)
    def on_missing_credentials(request: HttpRequest, exc: AuthenticationError):
        return error_response("Authentication required", status=401)

    @api.exception_handler(SchemaValidationError)
    def on_schema_error(request: HttpRequest, exc: SchemaValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors
        )
        return error_response("Invalid request data", message=details, status=400)

    @api.exception_handler(HttpError)
    def on_http_error(request: HttpRequest, exc: HttpError):
        return error_response(str(exc), status=exc.status_code)

    @api.exception_handler(Exception)
    def on_unexpected_error(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return error_response("Something went wrong!", message=str(exc), status=500)


def route_not_found(request: HttpRequest, *args, **kwargs):
    """Catch-all view for paths no route matches."""
    return error_response("Route not found", status=404)
