"""Page cache port: abstract interface for invalidating rendered pages."""

from abc import ABC, abstractmethod


class PageCachePort(ABC):
    @abstractmethod
    def revalidate(self, path: str) -> None:
        """Mark the page rendered at ``path`` as stale."""
        ...
