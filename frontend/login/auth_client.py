# login/auth_client.py
from typing import Any, Dict

from frontend.utils.api_client import ApiClient


def _norm_email(e: str) -> str:
    return (e or "").strip().lower()


def _norm_pwd(p: str) -> str:
    return (p or "").strip()


class AuthApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """POST /api/auth/login -> {token, user: {email, role}}"""
        payload = {"email": _norm_email(email), "password": _norm_pwd(password)}
        return self.client.request("/api/auth/login", "POST", payload)

    def verify(self) -> Dict[str, Any]:
        """GET /api/auth/verify (bearer) -> {user: {email, role}}"""
        return self.client.request("/api/auth/verify")
