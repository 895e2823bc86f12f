import re
from django.conf import settings
from rest_framework.exceptions import ValidationError

EMAIL_REGEX = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


def validate_non_empty(value, field_name: str, message: str = None) -> str:
    """Rejects non-string or whitespace-only values and returns the stripped string"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError({field_name: message or f'{field_name} is required'})
    return value.strip()


def validate_email_format(email: str):
    """Checks the email format"""
    if not re.match(EMAIL_REGEX, email or ''):
        raise ValidationError({'email': 'Invalid email address'})


def validate_password_length(password: str):
    """Checks the password meets the configured minimum length"""
    min_length = getattr(settings, 'QUIZ_MIN_PASSWORD_LENGTH', 6)
    if len(password or '') < min_length:
        raise ValidationError(
            {'password': f'Password must be at least {min_length} characters long'})
