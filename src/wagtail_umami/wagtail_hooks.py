from wagtail import hooks

from wagtail_umami.search import REQUEST_ATTRIBUTE, SearchContext


@hooks.register('before_serve_page')
def reset_search_context(page, request, serve_args, serve_kwargs):
    """
    Start every served page with an empty search context.
    """
    setattr(request, REQUEST_ATTRIBUTE, SearchContext())
    return None  # Return None to allow normal processing
