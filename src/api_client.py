from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

import requests

from src.page_timing import record_api_time
from src.secrets import DEFAULT_API_TIMEOUT_SECONDS, get_api_url, get_float_setting

logger = logging.getLogger(__name__)
timing_logger = logging.getLogger("uvicorn.error")

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.payload = payload


class UnauthorizedError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ApiResponse:
    __slots__ = ("status", "data", "headers")

    def __init__(self, status: int, data: Any, headers: Mapping[str, str]):
        self.status = status
        self.data = data
        self.headers = headers


def _error_message(response: requests.Response) -> tuple[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"]), payload
    return f"HTTP {response.status_code} {response.reason or ''}".strip(), payload


def _parse_body(response: requests.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:
    """Thin JSON client over the portfolio backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url if base_url is not None else get_api_url()).rstrip("/")
        self.token = token
        self.timeout = timeout if timeout is not None else get_float_setting(
            "API_TIMEOUT_SECONDS", DEFAULT_API_TIMEOUT_SECONDS
        )
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = dict(JSON_HEADERS)
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise ApiError("No se encontró la URL base de la API")
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> ApiResponse:
        url = self._url(path)
        start = time.perf_counter()
        status: Optional[int] = None
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
            status = response.status_code
        except requests.RequestException as exc:
            logger.warning("API request failed method=%s path=%s: %s", method, path, exc)
            raise ApiError(str(exc) or "Error en la conexión") from exc
        finally:
            elapsed = time.perf_counter() - start
            record_api_time(elapsed, method=method, failed=status is None or status >= 400)
            timing_logger.info(
                "api.timing method=%s path=%s status=%s ms=%.2f",
                method,
                path,
                status,
                elapsed * 1000.0,
            )

        if response.status_code >= 400:
            message, payload = _error_message(response)
            if response.status_code == 401:
                raise UnauthorizedError(message, status=401, payload=payload)
            if response.status_code == 404:
                raise NotFoundError(message, status=404, payload=payload)
            raise ApiError(message, status=response.status_code, payload=payload)

        return ApiResponse(response.status_code, _parse_body(response), response.headers)

    def get(self, path: str, *, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: Any = None) -> ApiResponse:
        return self.request("POST", path, json=payload)

    def put(self, path: str, payload: Any = None) -> ApiResponse:
        return self.request("PUT", path, json=payload)

    def delete(self, path: str) -> ApiResponse:
        return self.request("DELETE", path)
