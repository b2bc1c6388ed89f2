# utils/api_client.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

GENERIC_ERROR = "API request failed"


class ApiError(Exception):
    """Base de todos los fallos que devuelve ``ApiClient.request``."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkFailure(ApiError):
    """No hubo respuesta HTTP (host caído, timeout, DNS...)."""


class AuthFailure(ApiError):
    """401 / 403."""


class ValidationFailure(ApiError):
    """Cualquier otro 4xx."""


class ServerFailure(ApiError):
    """5xx."""


def _error_class(status: int) -> type[ApiError]:
    if status in (401, 403):
        return AuthFailure
    if 400 <= status < 500:
        return ValidationFailure
    return ServerFailure


def _decode(res) -> Any:
    if not res.content:
        return None
    try:
        return res.json()
    except ValueError:
        return None


def _error_message(data: Any) -> str:
    if isinstance(data, dict):
        for key in ("error", "detail"):
            msg = data.get(key)
            if isinstance(msg, str) and msg.strip():
                return msg
    return GENERIC_ERROR


class ApiClient:
    """
    Un request = una llamada independiente: sin reintentos, sin colas,
    sin deduplicar llamadas iguales concurrentes.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        session: Any = None,
        timeout: int = 10,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        # cualquier objeto con .request(method, url, json=, headers=, timeout=)
        self.session = session or requests.Session()
        self.timeout = timeout
        self._auth_failure_listeners: List[Callable[[AuthFailure], None]] = []

    def add_auth_failure_listener(self, callback: Callable[[AuthFailure], None]) -> None:
        """``callback`` recibe el error cuando un request CON token vuelve 401."""
        self._auth_failure_listeners.append(callback)

    def _headers(self, token: Optional[str], with_body: bool) -> Dict[str, str]:
        h = {"Accept": "application/json"}
        if with_body:
            h["Content-Type"] = "application/json"
        if token:
            h["Authorization"] = f"Bearer {token}"
        return h

    def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        token = self.token_provider() if self.token_provider else None
        url = f"{self.base_url}{path}"
        try:
            res = self.session.request(
                method,
                url,
                json=body,
                headers=self._headers(token, body is not None),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise NetworkFailure(f"Network error: {e}") from e

        status = res.status_code
        data = _decode(res)
        logger.debug("%s %s -> %s", method, path, status)
        if 200 <= status < 300:
            return data

        err = _error_class(status)(_error_message(data), status)
        if status == 401 and token:
            for callback in list(self._auth_failure_listeners):
                callback(err)
        raise err
