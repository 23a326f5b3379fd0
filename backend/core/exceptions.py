"""
API exception handling
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from .utils import error_response_data

logger = logging.getLogger('backend.core')


def api_exception_handler(exc, context):
    """
    DRF exception handler that reports errors under an 'error' key.

    Field validation errors keep DRF's dict shape; errors that only carry a
    'detail' message (401, 403, 404, 405) are returned as {'error': ...}.
    Anything else is logged and answered with 500 {'error', 'details'}.
    """
    response = exception_handler(exc, context)
    if response is None:
        view = context.get('view')
        logger.error(f"Unhandled exception in {view.__class__.__name__ if view else 'view'}: {exc}", exc_info=exc)
        set_rollback()
        return Response(error_response_data('Internal server error', exc),
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(response.data, dict) and set(response.data.keys()) == {'detail'}:
        response.data = {'error': str(response.data['detail'])}
    return response
