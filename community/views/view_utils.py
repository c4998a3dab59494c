from django.core.paginator import Paginator

PAGE_SIZE = 15


def is_ajax_request(request):
    """
    Return True when the request was triggered via HTMX or XMLHttpRequest headers.
    """
    header = request.headers.get("HX-Request") or request.headers.get("x-requested-with")
    return bool(header == "XMLHttpRequest" or header)


def paginate(request, queryset, per_page=PAGE_SIZE):
    """Return the page requested by ?page=, clamped to the valid range."""
    return Paginator(queryset, per_page).get_page(request.GET.get("page"))
