import logging
import os

import django
import pytest
from django.apps import apps
from django.conf import settings

# Configurar o Django antes de qualquer operação
if not apps.ready:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "iconhub.settings_test")
    django.setup()

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def reset_icons_factory():
    """Garante uma fábrica de ícones nova para cada teste."""
    from icons.factory import reset_factory

    reset_factory()
    yield
    reset_factory()


def pytest_configure():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "iconhub.settings_test")
    if not settings.configured:
        django.setup()
