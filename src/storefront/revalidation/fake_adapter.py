"""Fake page cache: records revalidated paths for tests and local runs."""

from storefront.revalidation.port import PageCachePort


class FakePageCache(PageCachePort):
    def __init__(self):
        self.revalidated: list[str] = []

    def revalidate(self, path: str) -> None:
        self.revalidated.append(path)

    def clear(self):
        self.revalidated.clear()
