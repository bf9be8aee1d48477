"""
Accounts URL configuration.

Mounted under /api/ by the root URL config.
"""

from django.urls import path

from .views import AuthView, RegisterView

urlpatterns = [
    path("users/", RegisterView.as_view(), name="users-register"),
    path("auth/", AuthView.as_view(), name="auth"),
]
