import logging
from rest_framework import status  # symbolic HTTP status codes
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response  # DRF HTTP response wrapper
from rest_framework.views import APIView  # DRF base API view
from auth_app.api.serializers import LoginSerializer, RegisterSerializer
from auth_app.services import accounts
from core.utils.authentication import issue_token
from core.utils.exceptions import Conflict, StorageError

logger = logging.getLogger(__name__)


def _auth_payload(message: str, user_id: int, username: str, email: str) -> dict:
    """Response body shared by register and login"""
    return {
        'message': message,
        'token': issue_token(user_id, username),
        'user': {
            'id': user_id,
            'username': username,
            'email': email,
        },
    }


class RegisterView(APIView):
    """
    POST /api/register
    Creates a user and returns a bearer token.

    Responses:
      - 201: {'message', 'token', 'user'}
      - 400: missing fields, short password, or email/username already taken
      - 500: storage failure
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request):
        serializer = RegisterSerializer(data=request.data)  # init serializer with request data
        serializer.is_valid(raise_exception=True)  # 400 with the first message
        data = serializer.validated_data

        try:
            # fast path for the common duplicate; the unique constraint stays authoritative
            if accounts.get_user_by_email(data['email']) is not None:
                raise Conflict()
            user_id = accounts.create_user(data['username'], data['email'], data['password'])
        except StorageError:
            return Response({'error': 'Error creating user'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        body = _auth_payload('User created successfully', user_id, data['username'], data['email'])
        return Response(body, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    POST /api/login
    Exchanges email/password for a bearer token.

    Responses:
      - 200: {'message', 'token', 'user'}
      - 400: missing fields, or 'Invalid credentials' for unknown email and wrong password alike
      - 500: storage failure
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        try:
            serializer.is_valid(raise_exception=True)
        except StorageError:
            return Response({'error': 'Database error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        user = serializer.validated_data['user']
        logger.info('User %s logged in', user.id)
        body = _auth_payload('Login successful', user.id, user.username, user.email)
        return Response(body, status=status.HTTP_200_OK)
