"""Root URL configuration; every endpoint lives under /api/"""
from django.urls import include, path
from core.views import HealthView


urlpatterns = [
    path('api/health', HealthView.as_view(), name='api-health'),
    path('api/', include('auth_app.api.urls')),
    path('api/', include('main_app.api.urls')),
]

handler404 = 'core.views.endpoint_not_found'
handler500 = 'core.views.server_error'
