# exceptions.py
from rest_framework.views import exception_handler, set_rollback
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError
import logging
from django.conf import settings

from sales.exceptions import SaleError

logger = logging.getLogger(__name__)


def first_error_message(detail):
    """Pick the first human readable message out of a DRF error structure"""
    if isinstance(detail, dict):
        for value in detail.values():
            return first_error_message(value)
        return 'Error de validación'
    if isinstance(detail, (list, tuple)):
        if detail:
            return first_error_message(detail[0])
        return 'Error de validación'
    return str(detail)


def custom_exception_handler(exc, context):
    """
    Exception handler for the kermesse API.

    Every error body has the shape {"error": "<message>"}.
    """
    # Sale, correction and reset rule violations
    if isinstance(exc, SaleError):
        set_rollback()
        logger.info(f"Rejected request: {exc.message}")
        return Response({'error': exc.message}, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        response.data = {'error': first_error_message(response.data)}
        return response

    set_rollback()

    # Handle Django ValidationError
    if isinstance(exc, ValidationError):
        logger.error(f"Validation Error: {exc}")
        return Response(
            {'error': exc.messages[0] if exc.messages else 'Error de validación'},
            status=status.HTTP_400_BAD_REQUEST,
        )

    # Handle Django IntegrityError
    if isinstance(exc, IntegrityError):
        logger.error(f"Integrity Error: {exc}")
        return Response(
            {'error': 'La operación viola las restricciones de la base de datos'},
            status=status.HTTP_400_BAD_REQUEST,
        )

    # Store or connectivity failures
    if isinstance(exc, DatabaseError):
        logger.error(f"Database Error: {exc}")
        return Response({'error': str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # Handle unexpected errors
    logger.exception(f"Unexpected Error: {exc}")
    return Response(
        {'error': str(exc) if settings.DEBUG else 'Ocurrió un error inesperado'},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
