"""Build the Umami markup for the page <head>"""

import json
import logging

from django.core.serializers.json import DjangoJSONEncoder
from django.forms.utils import flatatt
from django.template.loader import render_to_string
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from wagtail_umami.roles import BOT, EDITOR, SYSOP, display_name, has_role

logger = logging.getLogger(__name__)

BOTS_DISABLED = "<!-- Umami extension is disabled for bots -->"
SYSOPS_DISABLED = (
    "<!-- Umami tracking is disabled for users with 'protect' rights (i.e., sysops) -->"
)
EDITORS_DISABLED = "<!-- Umami tracking is disabled for users with 'edit' rights -->"
NOT_CONFIGURED = "<!-- You need to set the settings for Umami -->"

# Client-side wait for the tracker to load
POLL_INTERVAL_MS = 100
MAX_POLL_ATTEMPTS = 50

SCRIPT_TEMPLATE = "wagtail_umami/umami_script.js"

_JSON_ESCAPES = {
    ord(">"): "\\u003E",
    ord("<"): "\\u003C",
    ord("&"): "\\u0026",
}


def to_json(value):
    """Encode ``value`` as JSON that is safe inside an inline <script>."""
    encoded = json.dumps(value, cls=DjangoJSONEncoder).translate(_JSON_ESCAPES)
    return mark_safe(encoded)


def loader_attributes(config):
    attrs = {
        "async": True,
        "data-auto-track": "false",
        "data-website-id": config.website_id,
    }
    if config.dnt:
        attrs["data-do-not-track"] = "true"
    if config.cache:
        attrs["data-cache"] = "true"
    if config.domains:
        attrs["data-domains"] = ",".join(config.domains)
    if config.host_url:
        attrs["data-host-url"] = config.host_url
    attrs["src"] = config.script_src
    return attrs


def suppression_reason(user, config):
    """Return the comment to render instead of tracking code, if any."""
    if config.ignore_bots and has_role(user, BOT, config):
        return BOTS_DISABLED
    if config.ignore_sysops and has_role(user, SYSOP, config):
        return SYSOPS_DISABLED
    if config.ignore_editors and has_role(user, EDITOR, config):
        return EDITORS_DISABLED
    return None


def build_injection(user, config, search_context=None):
    """
    Build the markup to insert into the page <head>.

    Args:
        user: The requesting user (``AnonymousUser`` for visitors)
        config: UmamiConfig snapshot
        search_context: SearchContext for the current request, if any

    Returns:
        SafeString: The loader tag followed by the inline tracking script,
        or an HTML comment when tracking is disabled or not configured
    """
    reason = suppression_reason(user, config)
    if reason is not None:
        logger.debug("Umami tracking suppressed for %s", user)
        return mark_safe(reason)

    if not config.is_configured:
        logger.debug("Umami is missing UMAMI_WEBSITE_ID or UMAMI_URL")
        return mark_safe(NOT_CONFIGURED)

    loader = format_html("<script{}></script>", flatatt(loader_attributes(config)))

    username = display_name(user) if config.track_usernames else None
    search_event = search_context.as_event() if search_context is not None else None

    script = render_to_string(
        SCRIPT_TEMPLATE,
        {
            "poll_interval": POLL_INTERVAL_MS,
            "max_attempts": MAX_POLL_ATTEMPTS,
            "username_json": to_json(username) if username else None,
            "search_event_json": to_json(search_event) if search_event else None,
            "custom_js": mark_safe(config.custom_script),
        },
    )
    return loader + format_html("<script>{}</script>", mark_safe(script))
