"""Records returned by the Expensify integration API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True)
class User:
    """An employee attached to an Expensify policy."""

    role: str = ""
    email: str = ""
    submits_to: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a user from an API employee object; missing keys become empty."""
        return cls(
            role=_text(data, "role"),
            email=_text(data, "email"),
            submits_to=_text(data, "submitsTo"),
        )


@dataclass(frozen=True)
class Policy:
    """An Expensify policy (workspace)."""

    output_currency: str = ""
    owner: str = ""
    role: str = ""
    name: str = ""
    id: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Policy":
        """Build a policy from an API policy object; missing keys become empty."""
        return cls(
            output_currency=_text(data, "outputCurrency"),
            owner=_text(data, "owner"),
            role=_text(data, "role"),
            name=_text(data, "name"),
            id=_text(data, "id"),
            type=_text(data, "type"),
        )