"""Application service (use case) for Client operations."""

from bookkeeper.application.interfaces import RecordRepository
from bookkeeper.application.schemas import ClientCreate, ClientUpdate
from bookkeeper.domain.entities import Client, ClientStatus
from bookkeeper.domain.exceptions import EntityNotFoundError


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: RecordRepository[Client]):
        self._repository = repository

    def get_client(self, client_id: str) -> Client:
        client = self._repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    def list_clients(
        self,
        user_id: str,
        *,
        status: ClientStatus | None = None,
        search: str | None = None,
    ) -> list[Client]:
        clients = self._repository.get_all(user_id)
        if status is not None:
            clients = [c for c in clients if c.status == status]
        if search:
            needle = search.lower()
            clients = [
                c for c in clients
                if needle in c.name.lower()
                or needle in c.email.lower()
                or needle in c.company.lower()
            ]
        return clients

    def create_client(self, user_id: str, data: ClientCreate) -> Client:
        return self._repository.create({"user_id": user_id, **data.model_dump()})

    def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        updated = self._repository.update(client_id, patch)
        if updated is None:
            raise EntityNotFoundError("Client", client_id)
        return updated

    def delete_client(self, client_id: str) -> bool:
        """Delete a client. Its invoices and payments are left in place."""
        if not self._repository.delete(client_id):
            raise EntityNotFoundError("Client", client_id)
        return True
