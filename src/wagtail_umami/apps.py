from django.apps import AppConfig


class WagtailUmamiConfig(AppConfig):
    name = "wagtail_umami"
    label = "wagtail_umami"
    verbose_name = "Umami analytics"

    def ready(self):
        # Connect receivers and register system checks
        from wagtail_umami import checks, conf, signals  # noqa: F401
