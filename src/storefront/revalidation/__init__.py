"""Page cache adapter: tells the presentation layer which pages went stale."""

import os

_page_cache_instance = None


def get_page_cache():
    """Return the configured page cache adapter (singleton).

    Uses FakePageCache by default. Set PAGE_CACHE_ADAPTER=http (with
    REVALIDATE_URL and REVALIDATE_TOKEN) to call the storefront's
    revalidation endpoint.
    """
    global _page_cache_instance
    if _page_cache_instance is None:
        adapter = os.environ.get("PAGE_CACHE_ADAPTER", "fake")
        if adapter == "fake":
            from storefront.revalidation.fake_adapter import FakePageCache

            _page_cache_instance = FakePageCache()
        elif adapter == "http":
            from storefront.revalidation.http_adapter import HttpPageCache

            _page_cache_instance = HttpPageCache(
                endpoint=os.environ["REVALIDATE_URL"],
                token=os.environ.get("REVALIDATE_TOKEN"),
            )
        else:
            raise ValueError(f"Unknown page cache adapter: {adapter}")
    return _page_cache_instance


def set_page_cache(page_cache):
    global _page_cache_instance
    _page_cache_instance = page_cache


def reset_page_cache():
    """Reset the page cache singleton (useful for testing)."""
    global _page_cache_instance
    _page_cache_instance = None
