"""Per-request capture of search data for the Umami search event"""

import logging
from collections.abc import Sized

from django.db.models import QuerySet
from wagtail.search.backends.base import BaseSearchResults

logger = logging.getLogger(__name__)

REQUEST_ATTRIBUTE = "umami_search"


def count_matches(matches):
    """
    Count the results in a search result set.

    Accepts None, an int, a queryset, Wagtail search results, or any sized
    collection such as a paginator page. Anything else counts as 0.
    """
    if matches is None:
        return 0
    if isinstance(matches, int):
        return matches
    if isinstance(matches, (QuerySet, BaseSearchResults)):
        return matches.count()
    if isinstance(matches, Sized):
        return len(matches)
    logger.debug("Cannot count search results of type %s", type(matches).__name__)
    return 0


class SearchContext:
    """
    Search term, profile and result count seen during one request.

    Created empty for each request and filled in by the search signals
    before the page head is rendered.
    """

    def __init__(self):
        self.term = None
        self.profile = None
        self.count = None

    def __repr__(self):
        return f"<SearchContext term={self.term!r} profile={self.profile!r} count={self.count!r}>"

    @classmethod
    def for_request(cls, request):
        """Return the context attached to ``request``, creating it if needed."""
        context = getattr(request, REQUEST_ATTRIBUTE, None)
        if context is None:
            context = cls()
            setattr(request, REQUEST_ATTRIBUTE, context)
        return context

    def set_results(self, term, title_matches=None, text_matches=None):
        self.term = term
        self.count = count_matches(title_matches) + count_matches(text_matches)
        logger.debug("Captured search %r with %d results", term, self.count)

    def set_profile(self, profile):
        self.profile = profile

    def as_event(self):
        """
        Data for the ``search`` event, or None when no search happened.

        A profile or count without a term is never reported.
        """
        if self.term is None:
            return None

        event = {"search": self.term}
        if self.profile is not None:
            event["search_cat"] = self.profile
        if self.count is not None:
            event["search_count"] = self.count
        return event
