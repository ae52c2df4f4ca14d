from __future__ import annotations

import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from timeline.data.items import item_from_wire, items_from_wire, new_item_payload

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8000"
TIMELINE_PATH = "/api/v1/timeline"

_SECRET_GETTER = None


class ApiError(RuntimeError):
    def __init__(self, status_code: int, reason: str, detail: Any):
        super().__init__(f"API error {status_code} {reason}: {detail}")
        self.status_code = status_code
        self.reason = reason
        self.detail = detail


def _build_session():
    session = requests.Session()
    retry = Retry(
        total=2,
        backoff_factor=0.5,
        status_forcelist=(502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_connections=4, pool_maxsize=4)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def configure(secret_getter):
    global _SECRET_GETTER
    _SECRET_GETTER = secret_getter


def _get_secret(path, default=None):
    if _SECRET_GETTER is None:
        return default
    return _SECRET_GETTER(path, default)


def api_base_url():
    return (
        _get_secret(("app", "TIMELINE_API_URL"))
        or _get_secret(("TIMELINE_API_URL",))
        or os.getenv("TIMELINE_API_URL")
        or DEFAULT_API_BASE_URL
    )


def _error_detail(response):
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "detail" in body:
        return body["detail"]
    return body


def request(method: str, path: str, params: dict | None = None, json: dict | None = None, timeout: int = 10) -> Any:
    url = f"{api_base_url().rstrip('/')}{path}"
    response = _SESSION.request(method, url, params=params, json=json, timeout=timeout)
    if not response.ok:
        detail = _error_detail(response)
        logger.warning("%s %s failed: %s %s", method, url, response.status_code, detail)
        raise ApiError(response.status_code, response.reason, detail)
    if response.status_code == 204:
        return None
    return response.json()


def fetch_items():
    return items_from_wire(request("GET", TIMELINE_PATH))


def create_item(group, name, start_date, end_date=None):
    payload = new_item_payload(group, name, start_date, end_date)
    return item_from_wire(request("POST", TIMELINE_PATH, json=payload))
