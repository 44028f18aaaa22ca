"""
JSON response envelope.

Every response body has the shape
`{success: bool, data?: any, error?: str, message?: str}`.
"""
from typing import Any, Optional

from django.http import JsonResponse


def success_response(data: Any = None, message: Optional[str] = None, status: int = 200) -> JsonResponse:
    body = {'success': True}
    if data is not None:
        body['data'] = data
    if message:
        body['message'] = message
    return JsonResponse(body, status=status)


def error_response(error: str, message: Optional[str] = None, status: int = 400) -> JsonResponse:
    body = {'success': False, 'error': error}
    if message:
        body['message'] = message
    return JsonResponse(body, status=status)
