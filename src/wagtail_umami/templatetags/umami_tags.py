"""Template tags for Umami analytics integration"""

import logging

from django import template
from django.contrib.auth.models import AnonymousUser

from wagtail_umami.conf import get_config
from wagtail_umami.injector import build_injection
from wagtail_umami.search import SearchContext

logger = logging.getLogger(__name__)

register = template.Library()


@register.simple_tag(takes_context=True)
def umami_head(context):
    """
    Include the Umami tracking script in <head> section.

    Usage in template:
        {% load umami_tags %}
        <head>
            ...
            {% umami_head %}
        </head>
    """
    request = context.get('request')

    if not request:
        return ''

    try:
        user = getattr(request, 'user', None) or AnonymousUser()
        return build_injection(user, get_config(), SearchContext.for_request(request))
    except Exception:
        # Never break page rendering because of analytics
        logger.exception("Failed to render Umami tracking code")

    return ''
