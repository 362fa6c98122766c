"""
Umami settings.

Every option is read from the Django settings module under an ``UMAMI_``
prefix, e.g.::

    UMAMI_WEBSITE_ID = "4fb7fa4c-5b46-438d-94b3-3a8fb9bc2e8b"
    UMAMI_URL = "https://analytics.example.com"
    UMAMI_DOMAINS = ["example.com", "www.example.com"]
    UMAMI_IGNORE_EDITORS = True
"""

import functools
import logging
from dataclasses import dataclass

from django.conf import settings
from django.dispatch import receiver
from django.test.signals import setting_changed

logger = logging.getLogger(__name__)

DEFAULT_JS_FILE = "script.js"
DEFAULT_BOT_GROUP = "Bots"

# Parameter name -> (UmamiConfig field, Django setting)
PARAMETERS = {
    "WebsiteID": ("website_id", "UMAMI_WEBSITE_ID"),
    "URL": ("url", "UMAMI_URL"),
    "JSFile": ("js_file", "UMAMI_JS_FILE"),
    "CustomJS": ("custom_js", "UMAMI_CUSTOM_JS"),
    "HostURL": ("host_url", "UMAMI_HOST_URL"),
    "DNT": ("dnt", "UMAMI_DNT"),
    "Cache": ("cache", "UMAMI_CACHE"),
    "Domains": ("domains", "UMAMI_DOMAINS"),
    "IgnoreBots": ("ignore_bots", "UMAMI_IGNORE_BOTS"),
    "IgnoreSysops": ("ignore_sysops", "UMAMI_IGNORE_SYSOPS"),
    "IgnoreEditors": ("ignore_editors", "UMAMI_IGNORE_EDITORS"),
    "TrackUsernames": ("track_usernames", "UMAMI_TRACK_USERNAMES"),
    "BotGroup": ("bot_group", "UMAMI_BOT_GROUP"),
}


def join_custom_js(custom_js):
    """
    Normalize custom JavaScript to a single string.

    A list (or tuple) of snippets is joined with line breaks in list order,
    so ``["a()", "b()"]`` and ``"a()\\nb()"`` produce the same script.
    """
    if not custom_js:
        return ""
    if not isinstance(custom_js, (list, tuple)):
        return str(custom_js)
    return "\n".join(str(line) for line in custom_js)


def _as_tuple(value):
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class UmamiConfig:
    """Immutable snapshot of the Umami settings."""

    website_id: str = ""
    url: str = ""
    js_file: str = DEFAULT_JS_FILE
    custom_js: object = ""
    host_url: str = ""
    dnt: bool = False
    cache: bool = False
    domains: tuple = ()
    ignore_bots: bool = False
    ignore_sysops: bool = False
    ignore_editors: bool = False
    track_usernames: bool = False
    bot_group: str = DEFAULT_BOT_GROUP

    @classmethod
    def from_settings(cls, source=None):
        """Build a config from a settings object (``django.conf.settings`` by default)."""
        source = settings if source is None else source
        values = {}
        for field, setting_name in PARAMETERS.values():
            value = getattr(source, setting_name, None)
            if value is not None:
                values[field] = value

        # DNT and Cache only count when explicitly set to True
        for flag in ("dnt", "cache"):
            values[flag] = values.get(flag) is True
        for flag in ("ignore_bots", "ignore_sysops", "ignore_editors", "track_usernames"):
            values[flag] = bool(values.get(flag))

        if "domains" in values:
            values["domains"] = _as_tuple(values["domains"])
        if isinstance(values.get("custom_js"), list):
            values["custom_js"] = tuple(values["custom_js"])
        if not values.get("js_file"):
            values["js_file"] = DEFAULT_JS_FILE
        if not values.get("bot_group"):
            values["bot_group"] = DEFAULT_BOT_GROUP

        return cls(**values)

    def get_parameter(self, name):
        """
        Look up a parameter by its name without the prefix.

        Args:
            name: Parameter name such as ``"WebsiteID"`` or ``"IgnoreBots"``

        Returns:
            The configured value, or None for unknown names
        """
        if name not in PARAMETERS:
            return None
        field, _setting_name = PARAMETERS[name]
        return getattr(self, field)

    @property
    def is_configured(self):
        return bool(self.website_id) and bool(self.url)

    @property
    def script_src(self):
        return f"{self.url}/{self.js_file}"

    @property
    def custom_script(self):
        return join_custom_js(self.custom_js)


@functools.lru_cache(maxsize=None)
def get_config():
    """Return the process-wide config, read once from Django settings."""
    return UmamiConfig.from_settings()


@receiver(setting_changed)
def reset_config(*, setting, **kwargs):
    if setting.startswith("UMAMI_"):
        logger.debug("Setting %s changed, reloading Umami config", setting)
        get_config.cache_clear()
