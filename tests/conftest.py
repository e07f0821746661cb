"""
Configurações globais do Pytest para School Admin.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.

Django é configurado aqui (SQLite em memória) para que os testes
de adapter usem os fixtures `db`/`client` do pytest-django; os
testes do Core não tocam no banco.
"""

import pytest


@pytest.fixture(autouse=True)
def reset_di_container():
    """
    Reset do container global entre testes.

    Garante que cada teste inicia com estado limpo.
    """
    from school_admin.config.container import reset_container

    reset_container()
    yield
    reset_container()


def pytest_configure(config):
    """Configura Django (SQLite em memória) antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY="test-secret-key",
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": ":memory:",
                }
            },
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.auth",
                "school_admin.adapters.django_app.school",
            ],
            ROOT_URLCONF="school_admin.config.urls",
            MIDDLEWARE=[],
            DEFAULT_AUTO_FIELD="django.db.models.BigAutoField",
            USE_TZ=True,
            TIME_ZONE="America/Sao_Paulo",
            CPF_STRICT_LENGTH=False,
        )
        django.setup()
