from django.apps import AppConfig


class GymnasticsConfig(AppConfig):
    name = "gymnastics"
    verbose_name = "Gymnastics signups"

    def ready(self) -> None:
        from gymnastics import signals  # noqa: F401
