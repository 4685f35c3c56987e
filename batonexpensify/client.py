"""Client for the Expensify integration server."""

from __future__ import annotations

import json
from typing import Any

import requests

from batonexpensify.models import Policy, User

BASE_URL = "https://integrations.expensify.com/Integration-Server/ExpensifyIntegrations"
REQUEST_TIMEOUT = 30.0


class ExpensifyError(Exception):
    """The API answered with an error or with something that is not a response."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(f"error: {message}")
        self.message = message
        self.status_code = status_code


class Client:
    """Issues job requests to the Expensify integration server."""

    def __init__(
        self,
        partner_user_id: str,
        partner_user_secret: str,
        session: requests.Session | None = None,
    ) -> None:
        self._partner_user_id = partner_user_id
        self._partner_user_secret = partner_user_secret
        self._session = session if session is not None else requests.Session()

    def _credentials(self) -> dict[str, str]:
        return {
            "partnerUserID": self._partner_user_id,
            "partnerUserSecret": self._partner_user_secret,
        }

    def get_policies(self) -> list[Policy]:
        """Return the policies the partner user is an admin of."""
        body = {
            "type": "get",
            "credentials": self._credentials(),
            "inputSettings": {"type": "policyList", "adminOnly": True},
        }
        data = self._do_request(body)
        return [Policy.from_dict(item) for item in data.get("policyList") or []]

    def get_policy_employees(self, policy_id: str) -> list[User]:
        """Return the employees of a single policy."""
        body = {
            "type": "get",
            "credentials": self._credentials(),
            "inputSettings": {
                "type": "policy",
                "fields": ["employees"],
                "policyIDList": [policy_id],
            },
        }
        data = self._do_request(body)
        info = (data.get("policyInfo") or {}).get(policy_id) or {}
        return [User.from_dict(item) for item in info.get("employees") or []]

    def _do_request(self, body: dict[str, Any]) -> dict[str, Any]:
        payload = {"requestJobDescription": json.dumps(body, separators=(",", ":"))}
        response = self._session.post(
            BASE_URL,
            data=payload,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=REQUEST_TIMEOUT,
        )
        try:
            data = response.json()
        except ValueError as exc:
            raise ExpensifyError(f"invalid response: {exc}", response.status_code) from exc
        if not isinstance(data, dict):
            raise ExpensifyError("invalid response: expected a JSON object", response.status_code)

        code = data.get("responseCode") or 0
        if code not in (0, 200):
            message = data.get("responseMessage")
            raise ExpensifyError("" if message is None else str(message), int(code))
        return data