from django.contrib.auth import authenticate, get_user_model
from rest_framework import serializers
from core.utils.validators import (
    validate_email_format,
    validate_non_empty,
    validate_password_length,
)

REQUIRED_MESSAGES = {
    'required': 'All fields are required',
    'blank': 'All fields are required',
    'null': 'All fields are required',
}
LOGIN_REQUIRED_MESSAGES = {
    'required': 'Email and password are required',
    'blank': 'Email and password are required',
    'null': 'Email and password are required',
}


class RegisterSerializer(serializers.Serializer):
    """Validates registration input. Uniqueness is left to the storage layer"""
    username = serializers.CharField(max_length=150, error_messages=REQUIRED_MESSAGES)
    email = serializers.CharField(max_length=254, error_messages=REQUIRED_MESSAGES)
    password = serializers.CharField(write_only=True, trim_whitespace=False, error_messages=REQUIRED_MESSAGES)

    def validate_username(self, value: str) -> str:
        return validate_non_empty(value, 'username', 'All fields are required')

    def validate_email(self, value: str) -> str:
        """Validates email format and returns it in the form it will be stored"""
        validate_email_format(value)
        return get_user_model().objects.normalize_email(value)

    def validate_password(self, value: str) -> str:
        """Validates the minimum password length"""
        if not value:
            raise serializers.ValidationError('All fields are required')
        validate_password_length(value)
        return value


class LoginSerializer(serializers.Serializer):
    """Validates email/password for login and injects the authenticated user"""
    email = serializers.CharField(write_only=True, error_messages=LOGIN_REQUIRED_MESSAGES)
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'},
        error_messages=LOGIN_REQUIRED_MESSAGES,
    )

    def validate(self, attrs):
        """Returns attrs with 'user' set, or one generic error for any mismatch"""
        user = authenticate(
            self.context.get('request'),
            email=attrs.get('email'),
            password=attrs.get('password'),
        )
        if user is None:
            raise serializers.ValidationError('Invalid credentials')
        attrs['user'] = user
        return attrs
