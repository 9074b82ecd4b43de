from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from ..models.period import SlotDefinition
from ..models.settings import UserSettings
from ..models.week import WeekTable
from .settings import settings_from_record, settings_to_payload


logger = logging.getLogger(__name__)


class ServiceError(RuntimeError):
    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class SettingsClient:
    """Thin JSON client for the account/settings service.

    ``login`` stores the bearer token; every other call except ``signup``
    and ``health`` sends it.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 12,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SettingsClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        if not self.token:
            raise ServiceError(401, "Access token required")
        return {"Authorization": f"Bearer {self.token}"}

    def _request(self, method: str, path: str, *, auth: bool = True, **kwargs: Any) -> Dict[str, Any]:
        headers = self._headers() if auth else {}
        resp = self.session.request(
            method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
        )
        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not resp.ok:
            message = data.get("error") if isinstance(data, dict) else None
            logger.warning(f"{method} {path} failed with {resp.status_code}")
            raise ServiceError(resp.status_code, message or resp.reason or "request failed")
        logger.debug(f"{method} {path} -> {resp.status_code}")
        return data if isinstance(data, dict) else {}

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health", auth=False)

    def signup(self, username: str, password: str, display_name: str | None = None) -> int:
        body = {"username": username, "password": password, "displayName": display_name}
        data = self._request("POST", "/signup", auth=False, json=body)
        return int(data["userId"])

    def login(self, username: str, password: str) -> Dict[str, Any]:
        data = self._request(
            "POST", "/login", auth=False, json={"username": username, "password": password}
        )
        self.token = data["token"]
        logger.info(f"Logged in as {username}")
        return data.get("user", {})

    def profile(self) -> Dict[str, Any]:
        return self._request("GET", "/profile")

    def login_count(self) -> int:
        return int(self._request("GET", "/login-count")["count"])

    def fetch_settings(self, default_week: WeekTable, slots: SlotDefinition) -> UserSettings:
        record = self._request("GET", "/settings")
        return settings_from_record(record, default_week, slots)

    def save_settings(self, settings: UserSettings) -> None:
        self._request("PUT", "/settings", json=settings_to_payload(settings))
        logger.info("Settings saved")
