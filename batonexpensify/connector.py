"""The Expensify connector: its syncers, metadata and credential check."""

from __future__ import annotations

from typing import Any

from batonexpensify.client import Client
from batonexpensify.syncers import PolicySyncer, UserSyncer

DISPLAY_NAME = "Expensify"
DESCRIPTION = "Connector syncing users and policies from Expensify to Baton"


class ExpensifyConnector:
    """Syncs Expensify users and policies."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def resource_syncers(self) -> list[UserSyncer | PolicySyncer]:
        return [UserSyncer(self._client), PolicySyncer(self._client)]

    def metadata(self) -> dict[str, Any]:
        return {"display_name": DISPLAY_NAME, "description": DESCRIPTION}

    def validate(self) -> None:
        """Check the credentials by fetching the policy list; raises on failure."""
        self._client.get_policies()


def new_connector(partner_user_id: str, partner_user_secret: str) -> ExpensifyConnector:
    """Create a connector talking to the live API with the given credentials."""
    return ExpensifyConnector(Client(partner_user_id, partner_user_secret))