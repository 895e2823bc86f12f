import pytest
from rest_framework import status


@pytest.mark.django_db
def test_health_is_public(api_client, settings):
    """GET /api/health answers without a token"""
    settings.API_VERSION = '9.9.9'
    resp = api_client.get('/api/health')
    assert resp.status_code == status.HTTP_200_OK
    body = resp.json()
    assert body['status'] == 'OK'
    assert body['message'] == 'Quiz Master API is running'
    assert body['version'] == '9.9.9'
    assert body['timestamp']


@pytest.mark.django_db
def test_unknown_route_returns_json_404(api_client):
    resp = api_client.get('/api/does-not-exist')
    assert resp.status_code == status.HTTP_404_NOT_FOUND
    assert resp.json() == {'error': 'Endpoint not found'}


@pytest.mark.django_db
def test_unhandled_error_detail_shown_only_in_development(auth_client, monkeypatch, settings):
    """Unexpected exceptions become 500; the message is exposed only with DEBUG on"""
    from main_app.services import store

    def explode(*args, **kwargs):
        raise RuntimeError('kaboom')

    monkeypatch.setattr(store, 'list_results_by_user', explode)

    resp = auth_client.get('/api/my-results')
    assert resp.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert resp.json() == {'error': 'Internal server error', 'message': 'Something went wrong'}

    settings.DEBUG = True
    resp = auth_client.get('/api/my-results')
    assert resp.json() == {'error': 'Internal server error', 'message': 'kaboom'}
