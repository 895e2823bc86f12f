"""Contains all necessary URLs for the auth_app API"""
from django.urls import path
from auth_app.api.views import RegisterView, LoginView


urlpatterns = [
    path('register', RegisterView.as_view(), name='api-register'),
    path('login', LoginView.as_view(), name='api-login'),
]
