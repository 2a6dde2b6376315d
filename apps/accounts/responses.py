"""Error responses shared by the account-scoped apps."""

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response


def plan_limit_response(error):
    """403 answer for a create rejected by the free-plan caps."""
    return Response({
        'error': str(error),
        'code': error.code,
        'upgrade_url': settings.PRO_UPGRADE_URL,
    }, status=status.HTTP_403_FORBIDDEN)
