from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    """
    GET /api/health
    Unauthenticated liveness probe.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            'status': 'OK',
            'message': 'Quiz Master API is running',
            'timestamp': timezone.now().isoformat(),
            'version': getattr(settings, 'API_VERSION', '1.0.0'),
        }, status=status.HTTP_200_OK)


def endpoint_not_found(request, exception=None):
    """JSON replacement for Django's HTML 404 page"""
    return JsonResponse({'error': 'Endpoint not found'}, status=status.HTTP_404_NOT_FOUND)


def server_error(request):
    """JSON replacement for Django's HTML 500 page"""
    return JsonResponse(
        {'error': 'Internal server error', 'message': 'Something went wrong'},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
