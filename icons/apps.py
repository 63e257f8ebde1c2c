from django.apps import AppConfig


class IconsConfig(AppConfig):
    name = "icons"
    verbose_name = "Icons"

    def ready(self) -> None:
        from . import signals  # noqa: F401
        from .factory import get_factory

        get_factory()
