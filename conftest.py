import pytest  # required to define shared fixtures
from rest_framework.test import APIClient


def pytest_configure():
    '''
    Ensures Django knows this is a test run; place for any global test tweaks.
    '''
    # fast hasher for tests
    from django.conf import settings
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


def bearer(client: APIClient, user) -> APIClient:
    """Sets 'Authorization: Bearer <token>' for the given user on the client"""
    from core.utils.authentication import issue_token
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(user.id, user.username)}')
    return client


@pytest.fixture
def api_client() -> APIClient:
    """Provides a DRF APIClient instance for making HTTP requests in tests"""
    return APIClient()


@pytest.fixture
def user(db, django_user_model):
    """Creates and returns the default quiz author"""
    return django_user_model.objects.create_user(username='alice', email='alice@example.com', password='pw123456')


@pytest.fixture
def other_user(db, django_user_model):
    """Creates and returns a second user to test ownership rules"""
    return django_user_model.objects.create_user(username='bob', email='bob@example.com', password='pw123456')


@pytest.fixture
def auth_client(user) -> APIClient:
    """APIClient authenticated as 'user'"""
    return bearer(APIClient(), user)


@pytest.fixture
def other_client(other_user) -> APIClient:
    """APIClient authenticated as 'other_user'"""
    return bearer(APIClient(), other_user)
