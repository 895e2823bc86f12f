from datetime import timedelta
import pytest
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.tokens import AccessToken
from core.utils.authentication import issue_token


@pytest.mark.django_db
def test_missing_header_returns_401(api_client):
    """No Authorization header means the caller is unauthenticated"""
    response = api_client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {'error': 'Access token required'}


@pytest.mark.django_db
def test_bearer_without_token_returns_401(api_client):
    """'Bearer' alone carries no credential"""
    api_client.credentials(HTTP_AUTHORIZATION='Bearer')
    response = api_client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
@pytest.mark.parametrize('token', ['not-a-jwt', 'abc.def.ghi'])
def test_malformed_token_returns_403(api_client, token):
    """Garbage tokens are rejected as forbidden"""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    response = api_client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {'error': 'Invalid token'}


@pytest.mark.django_db
def test_expired_token_returns_403(api_client, user):
    """An expired token is indistinguishable from any other invalid one"""
    token = AccessToken()
    token['user_id'] = user.id
    token['username'] = user.username
    token.set_exp(lifetime=-timedelta(minutes=1))
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    response = api_client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {'error': 'Invalid token'}


@pytest.mark.django_db
def test_token_signed_with_other_key_returns_403(api_client, user):
    """A token with a foreign signature is rejected"""
    token = AccessToken()
    token['user_id'] = user.id
    backend = TokenBackend('HS256', signing_key='someone-elses-secret')
    raw = backend.encode(dict(token.payload))
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {raw}')
    response = api_client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
def test_valid_token_authenticates_without_db_lookup(user, django_assert_num_queries):
    """The gate trusts the token claims; only the quiz query hits the database"""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(user.id, user.username)}')
    with django_assert_num_queries(1):
        response = client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_issue_token_embeds_identity():
    """Tokens carry user id and username claims"""
    token = AccessToken(issue_token(42, 'zoe'))
    assert str(token['user_id']) == '42'
    assert token['username'] == 'zoe'
    assert 'exp' in token.payload


@pytest.mark.django_db
@pytest.mark.parametrize('header_template', ['Basic {token}', 'Bearer {token} extra'])
def test_unusable_header_with_a_token_part_returns_403(api_client, user, header_template):
    """A header that carries something after the scheme but is not 'Bearer <token>' is forbidden"""
    api_client.credentials(HTTP_AUTHORIZATION=header_template.format(token=issue_token(user.id, user.username)))
    response = api_client.get('/api/my-quizzes')
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {'error': 'Invalid token'}
