from django.apps import AppConfig


class SafetyConfig(AppConfig):
    name = 'safety'
    verbose_name = 'Chemical Safety Hub'

    def ready(self):
        from . import checks  # noqa: F401
