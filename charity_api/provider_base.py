from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from charity_api.errors import ProviderError

logger = structlog.get_logger()

COMPLETED = "completed"
FAILED = "failed"


@dataclass
class Initiation:
    external_ref: str
    payload: dict[str, Any] = field(default_factory=dict)


class PaymentProvider(ABC):
    """A payment integration the donation flow can start and later confirm."""

    name = "provider"

    def __init__(self, base_url: str, client: httpx.Client | None = None, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    @abstractmethod
    def initiate(self, donation) -> Initiation:
        ...

    @abstractmethod
    def confirm(self, external_ref: str) -> str:
        """Return COMPLETED or FAILED for a previously initiated payment."""

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("Provider request failed", provider=self.name, url=url, error=str(exc))
            raise ProviderError(self.name, f"{method} {path} failed: {exc}") from exc

        if response.status_code >= 500:
            logger.error(
                "Provider server error",
                provider=self.name,
                url=url,
                status_code=response.status_code,
            )
            raise ProviderError(self.name, f"{method} {path} returned {response.status_code}")
        return response

    def _json(self, response: httpx.Response) -> dict[str, Any]:
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(self.name, "response body is not JSON") from exc

    def _expect_success(self, response: httpx.Response, action: str) -> dict[str, Any]:
        if response.status_code >= 400:
            logger.warning(
                "Provider rejected request",
                provider=self.name,
                action=action,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise ProviderError(self.name, f"{action} rejected with {response.status_code}")
        return self._json(response)
