import logging
from typing import Optional
from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction
from core.utils.exceptions import Conflict, StorageError

logger = logging.getLogger(__name__)


def create_user(username: str, email: str, password: str) -> int:
    """
    Stores a new account and returns its id.

    The password is hashed by Django's salted hasher before it reaches the table.
    A unique-constraint violation on username or email raises Conflict.
    """
    User = get_user_model()
    try:
        with transaction.atomic():
            user = User.objects.create_user(username=username, email=email, password=password)
    except IntegrityError as exc:
        logger.info('Rejected duplicate registration for %s', email)
        raise Conflict() from exc
    except DatabaseError as exc:
        logger.exception('User creation failed')
        raise StorageError('Error creating user') from exc
    logger.info('Registered user %s', user.id)
    return user.id


def get_user_by_email(email: str):
    """Returns the full user row (hash included, for login checks) or None"""
    User = get_user_model()
    # stored emails have a lowercased domain, see BaseUserManager.normalize_email
    email = User.objects.normalize_email(email)
    try:
        return User.objects.filter(email=email).first()
    except DatabaseError as exc:
        logger.exception('User lookup by email failed')
        raise StorageError('Database error') from exc


def get_user_by_id(user_id: int) -> Optional[dict]:
    """Returns the public fields of a user (never the password) or None"""
    User = get_user_model()
    try:
        user = User.objects.filter(pk=user_id).first()
    except DatabaseError as exc:
        logger.exception('User lookup by id failed')
        raise StorageError('Database error') from exc
    if user is None:
        return None
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'created_at': user.created_at,
    }
