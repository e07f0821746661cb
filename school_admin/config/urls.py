"""
URL Configuration para School Admin.

Estrutura:
- /students, /teachers, /directors - API dos registros escolares
- /health - Health check
"""

from django.urls import path, include

from school_admin.adapters.django_app.school.api_views import HealthView

urlpatterns = [
    # Registros escolares
    path("", include("school_admin.adapters.django_app.school.urls")),

    # Health check
    path("health", HealthView.as_view(), name="health"),
]
