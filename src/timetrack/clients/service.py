from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..projects.service import ProjectService
from .model import Client
from .repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, clients: ClientRepository, projects: ProjectRepository, project_service: ProjectService):
        self._clients = clients
        self._projects = projects
        self._project_service = project_service

    def list_clients(self) -> Sequence[Client]:
        return self._clients.list_all()

    def get_client(self, client_id: int) -> Client:
        client = self._clients.get_by_id(int(client_id))
        if not client:
            raise NotFoundError("Client not found")
        return client

    def create_client(self, *, name: str, vat: str) -> Client:
        client_id = self._clients.create_client(
            name=require_non_empty(name, "Name"),
            vat=require_non_empty(vat, "VAT number"),
        )
        return self.get_client(client_id)

    def update_client(self, client_id: int, changes: Mapping[str, Any]) -> Client:
        current = self.get_client(client_id)
        name = require_non_empty(changes["name"], "Name") if "name" in changes else current.name
        vat = require_non_empty(changes["vat"], "VAT number") if "vat" in changes else current.vat

        if not self._clients.update_client(current.client_id, name=name, vat=vat):
            raise ValidationError("Updating client failed")
        return self.get_client(current.client_id)

    def delete_client(self, client_id: int) -> None:
        client = self.get_client(client_id)

        projects = self._projects.list_all(client_id=client.client_id)
        for project in projects:
            self._project_service.delete_project(project.project_id)

        if not self._clients.delete_by_id(client.client_id):
            raise ValidationError("Deleting client failed")
        logger.info("Deleted client %s with %s projects", client.client_id, len(projects))
