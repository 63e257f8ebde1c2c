from __future__ import annotations

from django.core.signals import setting_changed
from django.dispatch import receiver

from .factory import reset_factory


@receiver(setting_changed)
def reset_icons_factory(sender, setting, **kwargs):
    if setting == "ICONS":
        reset_factory()
