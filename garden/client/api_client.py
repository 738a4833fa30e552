"""HTTP client for the garden API.

Every call is attempted exactly once. Transport failures raise NetworkError;
error responses raise the error type matching their status code.
"""
import logging
from typing import Iterable, List, Mapping, Optional

import httpx

from garden.domain.GardenPlan import GardenPlan
from garden.domain.Plant import Plant
from garden.domain.errors import GardenError, NetworkError, NotFoundError, StorageError, ValidationError
from garden.utilities.config import GARDEN_API_URL, GARDEN_API_TIMEOUT

logger = logging.getLogger(__name__)

_ERRORS_BY_STATUS = {
    400: ValidationError,
    404: NotFoundError,
}


class GardenApiClient:
    def __init__(self, base_url: str = GARDEN_API_URL, timeout: float = GARDEN_API_TIMEOUT,
                 http: Optional[httpx.Client] = None):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, **kwargs):
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkError(f"Could not reach the garden API ({method} {path})", str(e)) from e
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") if isinstance(body, dict) else None
        detail = body.get("error") if isinstance(body, dict) else None
        if response.status_code >= 500:
            error_cls = StorageError
        else:
            error_cls = _ERRORS_BY_STATUS.get(response.status_code, GardenError)
        raise error_cls(message or f"{method} {path} returned {response.status_code}", detail or response.text)

    def get_plants(self) -> List[Plant]:
        return [Plant.from_dict(doc) for doc in self._request("GET", "/plants")]

    def get_gardens(self) -> List[GardenPlan]:
        return [GardenPlan.from_dict(doc) for doc in self._request("GET", "/gardens")]

    def save_garden(self, items: Iterable[Mapping], total_estimated_savings: float,
                    name: Optional[str] = None) -> GardenPlan:
        payload = {"items": list(items), "totalEstimatedSavings": total_estimated_savings}
        if name:
            payload["name"] = name
        return GardenPlan.from_dict(self._request("POST", "/gardens", json=payload))

    def delete_garden(self, plan_id: str) -> str:
        return self._request("DELETE", f"/gardens/{plan_id}").get("message", "")

    def delete_all_gardens(self) -> int:
        return int(self._request("DELETE", "/gardens").get("count", 0))
