# utils/api.py
"""
REST backend client with shared session

Version: 1.0.0
- Single requests.Session reused across calls (like the DB engine singleton)
- Retries idempotent GETs on transient errors
- Every response is checked for HTTP errors and for {"success": false}
"""

import logging
import threading
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import API_CONFIG

logger = logging.getLogger(__name__)

_client = None
_client_lock = threading.Lock()


class ApiError(Exception):
    """Raised when a backend call fails or reports success=false"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin wrapper over the admin REST API"""

    def __init__(self, base_url: Optional[str] = None,
                 token: Optional[str] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or API_CONFIG["base_url"]).rstrip("/")
        self.token = token if token is not None else API_CONFIG["token"]
        self.timeout = timeout or API_CONFIG["timeout"]
        self.session = session or self._build_session(API_CONFIG["retries"])

    @staticmethod
    def _build_session(retries: int) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=(502, 503, 504),
            allowed_methods=frozenset(["GET"]),
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _headers(self, auth: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if auth and self.token:
            headers["token"] = self.token
        return headers

    def request(self, method: str, path: str, *,
                json: Optional[Dict[str, Any]] = None,
                data: Optional[Dict[str, Any]] = None,
                params: Optional[Dict[str, Any]] = None,
                auth: bool = True) -> Dict[str, Any]:
        """
        Send a request and return the decoded JSON body

        Raises:
            ApiError: transport failure, HTTP error status, or success=false
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            resp = self.session.request(
                method, url,
                json=json, data=data, params=params,
                headers=self._headers(auth),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise ApiError(f"Cannot reach backend: {e}") from e

        return self._decode(resp, method, path)

    @staticmethod
    def _decode(resp: requests.Response, method: str, path: str) -> Dict[str, Any]:
        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.status_code >= 400:
            message = body.get("message") if isinstance(body, dict) else None
            message = message or f"HTTP {resp.status_code}"
            logger.error(f"❌ {method} {path} -> {resp.status_code}: {message}")
            raise ApiError(message, resp.status_code)

        if not isinstance(body, dict):
            raise ApiError(f"Unexpected response from {path}", resp.status_code)

        if body.get("success") is False:
            message = body.get("message") or "Request was rejected by the backend"
            logger.warning(f"⚠️ {method} {path} rejected: {message}")
            raise ApiError(message, resp.status_code)

        return body

    def get(self, path: str, **kwargs) -> Dict[str, Any]:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Dict[str, Any]:
        return self.request("POST", path, **kwargs)

    def patch(self, path: str, **kwargs) -> Dict[str, Any]:
        return self.request("PATCH", path, **kwargs)


def get_api_client() -> ApiClient:
    """Return the shared ApiClient (created on first use)"""
    global _client

    if _client is None:
        with _client_lock:
            if _client is None:
                logger.info(f"🔌 Creating API client for {API_CONFIG['base_url']}")
                _client = ApiClient()

    return _client


def reset_api_client():
    """Drop the shared client so the next call builds a fresh session"""
    global _client

    with _client_lock:
        if _client is not None:
            _client.session.close()
            _client = None

    logger.info("🔄 API client reset")
