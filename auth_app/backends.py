from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from auth_app.services import accounts


class EmailBackend(ModelBackend):
    """
    Authenticate with email and password.
    Unknown email and wrong password both return None so callers cannot tell them apart.
    """

    def authenticate(self, request, email=None, password=None, **kwargs):
        if email is None or password is None:
            return None

        user = accounts.get_user_by_email(email)
        if user is None:
            # hash anyway so a missing account costs the same as a wrong password
            get_user_model()().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
