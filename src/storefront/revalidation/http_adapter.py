"""HTTP page cache: posts stale paths to the storefront's revalidation endpoint."""

import requests
import structlog

from storefront.revalidation.port import PageCachePort

logger = structlog.get_logger(__name__)


class HttpPageCache(PageCachePort):
    def __init__(self, endpoint: str, token: str | None = None, timeout: float = 2.0):
        self.endpoint = endpoint
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

    def revalidate(self, path: str) -> None:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = self.session.post(self.endpoint, json={"path": path}, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            # Stale pages expire on their own; the mutation has already committed
            logger.warning("Page revalidation failed", path=path, error=str(exc))
