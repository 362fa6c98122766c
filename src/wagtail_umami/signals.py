"""
Signals sent by a site's search view.

Usage in a search view:

    from wagtail_umami.signals import search_engine_selected, search_results_computed

    search_engine_selected.send(sender=None, request=request, profile="default")
    results = Page.objects.live().search(query)
    search_results_computed.send(
        sender=None, request=request, term=query, title_matches=None, text_matches=results
    )

Both must be sent before the template calls ``{% umami_head %}``.
"""

from django.dispatch import Signal, receiver

from wagtail_umami.search import SearchContext

# Provides: request, term, title_matches, text_matches
search_results_computed = Signal()

# Provides: request, profile
search_engine_selected = Signal()


@receiver(search_results_computed)
def capture_search_results(sender, request, term, title_matches=None, text_matches=None, **kwargs):
    SearchContext.for_request(request).set_results(term, title_matches, text_matches)


@receiver(search_engine_selected)
def capture_search_profile(sender, request, profile=None, **kwargs):
    SearchContext.for_request(request).set_profile(profile)
