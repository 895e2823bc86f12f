import logging
from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def first_error_message(detail, fallback: str = 'Invalid request.') -> str:
    """Digs the first human readable message out of DRF's list/dict error detail"""
    if isinstance(detail, str):
        return str(detail)
    if isinstance(detail, dict):
        if 'detail' in detail:
            return first_error_message(detail['detail'], fallback)
        for value in detail.values():
            message = first_error_message(value, '')
            if message:
                return message
        return fallback
    if isinstance(detail, (list, tuple)):
        for item in detail:
            message = first_error_message(item, '')
            if message:
                return message
        return fallback
    return fallback


def api_exception_handler(exc, context):
    """
    Renders every API error as {'error': <message>}.

    DRF-known exceptions keep their status code. Anything else is logged and
    becomes a 500 whose detail is only exposed in development mode.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error('Unhandled error in %s', view.__class__.__name__ if view else 'view', exc_info=exc)
        return Response(
            {
                'error': 'Internal server error',
                'message': str(exc) if settings.DEBUG else 'Something went wrong',
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, NotAuthenticated):
        message = 'Access token required'
    else:
        message = first_error_message(response.data)
    response.data = {'error': message}
    return response
