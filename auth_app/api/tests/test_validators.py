import pytest
from rest_framework.exceptions import ValidationError
from core.utils.validators import (
    validate_email_format,
    validate_non_empty,
    validate_password_length,
)


def test_validate_email_format_rejects_invalid():
    """Ensures validate_email_format raises ValidationError for syntactically invalid emails"""
    with pytest.raises(ValidationError):
        validate_email_format('not-an-email')


@pytest.mark.parametrize(
    'email',
    [
        'user@example.com',
        'user.name+tag@example.co.uk',
        'USER_123@example.io',
    ],
)
def test_validate_email_format_accepts_valid(email):
    """Valid emails should pass without error"""
    validate_email_format(email)


@pytest.mark.parametrize('pwd', ['', 'a', '12345'])
def test_validate_password_length_rejects_short(pwd):
    """Anything under six characters is rejected"""
    with pytest.raises(ValidationError):
        validate_password_length(pwd)


def test_validate_password_length_accepts_minimum():
    """Exactly six characters is enough; no composition rules apply"""
    validate_password_length('abcdef')


def test_validate_password_length_follows_settings(settings):
    """The minimum comes from QUIZ_MIN_PASSWORD_LENGTH"""
    settings.QUIZ_MIN_PASSWORD_LENGTH = 10
    with pytest.raises(ValidationError):
        validate_password_length('abcdefgh')


@pytest.mark.parametrize('value', ['', '   ', None, 123])
def test_validate_non_empty_rejects_blank_or_nonstring(value):
    """validate_non_empty should reject blank/whitespace or non-string values"""
    with pytest.raises(ValidationError):
        validate_non_empty(value, field_name='testfield')


def test_validate_non_empty_returns_stripped_value():
    """validate_non_empty should return the stripped string"""
    result = validate_non_empty('   hello  ', field_name='name')
    assert result == 'hello'
