from django.http import HttpRequest
from ninja import Router

from apps.core.responses import success_response
from apps.identity.security import JWTBearer
from .services import get_dashboard_stats

router = Router(tags=["Dashboard"], auth=JWTBearer())


@router.get("")
def dashboard_stats(request: HttpRequest):
    """
    Aggregate task and employee statistics.
    """
    return success_response(get_dashboard_stats())
