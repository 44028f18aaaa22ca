from django.utils.deprecation import MiddlewareMixin

API_PREFIX = '/api/'


class ApiTrailingSlashMiddleware(MiddlewareMixin):
    """
    Lets API clients add a trailing slash: `/api/tasks/` resolves like
    `/api/tasks`. Paths outside the API (admin) keep Django's own rules.
    """

    def process_request(self, request):
        path = request.path_info
        if path.startswith(API_PREFIX) and len(path) > len(API_PREFIX) and path.endswith('/'):
            request.path_info = path.rstrip('/')
