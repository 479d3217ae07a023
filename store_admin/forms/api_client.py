import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call. ``status_code`` is None when no response arrived."""

    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message

    @property
    def is_conflict(self) -> bool:
        return self.status_code == httpx.codes.CONFLICT


class CatalogApiClient:
    """Thin wrapper over an httpx.Client for the /api/{storeId}/{entity} routes."""

    def __init__(self, http: httpx.Client, user_id: Optional[str] = None, auth_header: str = "X-User-Id"):
        self.http = http
        self.user_id = user_id
        self.auth_header = auth_header

    def _headers(self) -> Dict[str, str]:
        if not self.user_id:
            return {}
        return {self.auth_header: self.user_id}

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self.http.request(method, path, json=json, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(e.response.status_code, e.response.text) from e
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed before a response arrived: {e}")
            raise ApiError(None, str(e)) from e
        return response.json()

    def create(self, store_id: str, entity: str, data: Dict[str, Any]) -> Any:
        return self._request("POST", f"/api/{store_id}/{entity}", json=data)

    def update(self, store_id: str, entity: str, entity_id: str, data: Dict[str, Any]) -> Any:
        return self._request("PATCH", f"/api/{store_id}/{entity}/{entity_id}", json=data)

    def delete(self, store_id: str, entity: str, entity_id: str) -> Any:
        return self._request("DELETE", f"/api/{store_id}/{entity}/{entity_id}")

    def get(self, store_id: str, entity: str, entity_id: str) -> Any:
        return self._request("GET", f"/api/{store_id}/{entity}/{entity_id}")
