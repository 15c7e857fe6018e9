"""App configuration for the officers Django app."""

from __future__ import annotations

from django.apps import AppConfig


class OfficersConfig(AppConfig):
    """Configuration for the `officers` app."""

    name = "officers"
    verbose_name = "Officers"
