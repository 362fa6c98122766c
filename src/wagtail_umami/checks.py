"""System checks for the Umami settings"""

from django.conf import settings
from django.core.checks import Error, Warning, register


def _is_string_list(value):
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


@register("umami")
def check_umami_settings(app_configs, **kwargs):
    errors = []

    if not getattr(settings, "UMAMI_WEBSITE_ID", None) or not getattr(settings, "UMAMI_URL", None):
        errors.append(
            Warning(
                "Umami tracking is not configured.",
                hint="Set UMAMI_WEBSITE_ID and UMAMI_URL to enable tracking.",
                id="wagtail_umami.W001",
            )
        )

    custom_js = getattr(settings, "UMAMI_CUSTOM_JS", None)
    if custom_js is not None and not isinstance(custom_js, str) and not _is_string_list(custom_js):
        errors.append(
            Error(
                "UMAMI_CUSTOM_JS must be a string or a list of strings.",
                id="wagtail_umami.E001",
            )
        )

    domains = getattr(settings, "UMAMI_DOMAINS", None)
    if domains is not None and not _is_string_list(domains):
        errors.append(
            Error(
                "UMAMI_DOMAINS must be a list of strings.",
                id="wagtail_umami.E002",
            )
        )

    return errors
