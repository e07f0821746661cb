"""
Configuração do Django App para o domínio escolar.
"""

from django.apps import AppConfig


class SchoolConfig(AppConfig):
    """Configuração do app School."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "school_admin.adapters.django_app.school"
    label = "school"
    verbose_name = "Cadastro Escolar"
