from typing import Optional, Tuple
from rest_framework.exceptions import PermissionDenied
from rest_framework.request import Request
from rest_framework_simplejwt.authentication import AUTH_HEADER_TYPE_BYTES, JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


def issue_token(user_id: int, username: str) -> str:
    """Creates a signed access token carrying the user's id and username"""
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = user_id
    token['username'] = username
    return str(token)


class BearerJWTAuthentication(JWTStatelessUserAuthentication):
    """
    Authenticates from 'Authorization: Bearer <token>' without touching the database.

    The token is the second space-separated part of the header. A missing header,
    or one with nothing after the scheme, leaves the request anonymous so protected
    views answer 401. Any other header that does not carry a verifiable bearer token
    (expired, malformed, bad signature, other scheme, extra parts) is rejected with 403.
    On success request.user is a TokenUser exposing 'id' and 'username' from the claims.
    """

    def authenticate(self, request: Request) -> Optional[Tuple[object, AccessToken]]:
        header = self.get_header(request)
        if header is None:
            return None
        parts = header.split(b' ')
        if len(parts) < 2 or not parts[1]:
            return None
        if len(parts) != 2 or parts[0] not in AUTH_HEADER_TYPE_BYTES:
            raise PermissionDenied('Invalid token')
        try:
            validated = self.get_validated_token(parts[1])
        except InvalidToken:
            raise PermissionDenied('Invalid token')
        return (self.get_user(validated), validated)
