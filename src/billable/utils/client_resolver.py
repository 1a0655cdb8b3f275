"""Utility for resolving client names to IDs."""

from billable.domain.client import ClientService
from billable.domain.errors import NotFoundError


def resolve_client(client_service: ClientService, client: str | int) -> int:
    """Resolve client name or ID to client ID.

    Args:
        client_service: ClientService instance
        client: Client name (str) or ID (int or string representation of int)

    Returns:
        Client ID

    Raises:
        NotFoundError: If client is not found
    """
    if isinstance(client, int):
        if client_service.get_client(client) is None:
            raise NotFoundError(f"Client ID {client} not found")
        return client

    text = client.strip()
    if text.isdigit():
        client_id = int(text)
        if client_service.get_client(client_id) is None:
            raise NotFoundError(f"Client ID {client_id} not found")
        return client_id

    for existing in client_service.list_clients():
        if existing.name == text:
            return existing.id

    raise NotFoundError(f"Client '{text}' not found")
