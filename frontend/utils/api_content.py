# utils/api_content.py
"""Fachadas por recurso: fijan path y método, nada más."""
from __future__ import annotations
from typing import Any, Dict, List

from frontend.utils.api_client import ApiClient


class AboutApi:
    path = "/api/about"

    def __init__(self, client: ApiClient):
        self.client = client

    def get(self) -> Dict[str, Any]:
        return self.client.request(self.path)

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(self.path, "PUT", data)


class CollectionApi:
    path = ""

    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self) -> List[Dict[str, Any]]:
        return self.client.request(self.path) or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(self.path, "POST", data)

    def update(self, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(f"{self.path}/{item_id}", "PUT", data)

    def delete(self, item_id: str) -> Any:
        return self.client.request(f"{self.path}/{item_id}", "DELETE")


class SkillsApi(CollectionApi):
    path = "/api/skills"


class ProjectsApi(CollectionApi):
    path = "/api/projects"

    def get_by_id(self, project_id: str) -> Dict[str, Any]:
        return self.client.request(f"{self.path}/{project_id}")


class ContactApi(CollectionApi):
    path = "/api/contact"
