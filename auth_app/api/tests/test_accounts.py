import pytest
from django.contrib.auth import get_user_model
from django.db import DatabaseError
from auth_app.services import accounts
from core.utils.exceptions import Conflict, StorageError


@pytest.mark.django_db
def test_create_user_returns_id_and_hashes_password():
    """create_user persists the row and stores a salted hash"""
    user_id = accounts.create_user('carol', 'carol@example.com', 'secret1')
    user = get_user_model().objects.get(pk=user_id)
    assert user.username == 'carol'
    assert user.password != 'secret1'
    assert user.check_password('secret1')


@pytest.mark.django_db
def test_create_user_duplicate_email_raises_conflict(user):
    """The unique constraint is the authoritative duplicate signal"""
    with pytest.raises(Conflict):
        accounts.create_user('alice2', 'alice@example.com', 'secret1')
    # the failed insert must not poison later queries in the same transaction
    assert get_user_model().objects.count() == 1


@pytest.mark.django_db
def test_create_user_duplicate_username_raises_conflict(user):
    with pytest.raises(Conflict):
        accounts.create_user('alice', 'fresh@example.com', 'secret1')


@pytest.mark.django_db
def test_get_user_by_email(user):
    assert accounts.get_user_by_email('alice@example.com') == user
    assert accounts.get_user_by_email('nobody@example.com') is None


@pytest.mark.django_db
def test_get_user_by_id_excludes_password(user):
    """The public view of a user never contains the password field"""
    record = accounts.get_user_by_id(user.id)
    assert record == {
        'id': user.id,
        'username': 'alice',
        'email': 'alice@example.com',
        'created_at': user.date_joined,
    }
    assert 'password' not in record
    assert accounts.get_user_by_id(999999) is None


@pytest.mark.django_db
def test_database_errors_become_storage_errors(monkeypatch):
    """Driver exceptions are wrapped into the opaque StorageError"""
    User = get_user_model()

    def broken(*args, **kwargs):
        raise DatabaseError('database is locked')

    monkeypatch.setattr(User.objects, 'filter', broken)
    with pytest.raises(StorageError):
        accounts.get_user_by_email('alice@example.com')
    with pytest.raises(StorageError):
        accounts.get_user_by_id(1)
