from rest_framework import status
from rest_framework.exceptions import APIException


class StorageError(Exception):
    """Raised for any persistence failure so callers can answer with an opaque 500"""
    pass


class Conflict(APIException):
    """Duplicate username or email; reported to clients as a plain 400"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'User already exists'
    default_code = 'conflict'
