"""Configuration fields for the Expensify connector."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


class ConfigError(ValueError):
    """A configuration value is missing or invalid."""


@dataclass(frozen=True)
class ConfigField:
    """A single string setting."""

    name: str
    display_name: str = ""
    description: str = ""
    required: bool = False
    is_secret: bool = False
    default: str = ""

    @property
    def attribute(self) -> str:
        return self.name.replace("-", "_")

    def to_schema(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": "string",
            "displayName": self.display_name,
            "description": self.description,
            "required": self.required,
            "isSecret": self.is_secret,
            "default": self.default,
        }


@dataclass(frozen=True)
class ExpensifyConfig:
    """Resolved settings for connecting to Expensify."""

    partner_user_id: str = field(repr=False)
    partner_user_secret: str = field(repr=False)


@dataclass(frozen=True)
class Configuration:
    """The connector's settings and how they are presented."""

    name: str
    fields: tuple[ConfigField, ...]
    display_name: str = ""
    help_url: str = ""
    icon_url: str = ""

    def resolve(self, values: Mapping[str, Any]) -> ExpensifyConfig:
        """Validate raw values (keyed by field name, dashes or underscores) into settings."""
        normalized = {str(key).replace("_", "-"): value for key, value in values.items()}
        resolved: dict[str, str] = {}
        for spec in self.fields:
            value = normalized.get(spec.name)
            if value is None:
                value = spec.default
            if not isinstance(value, str):
                raise ConfigError(f"field {spec.name} must be a string")
            if spec.required and not value:
                raise ConfigError(f"field {spec.name} is required")
            resolved[spec.attribute] = value
        return ExpensifyConfig(**resolved)

    def to_schema(self) -> dict[str, Any]:
        """Describe the configuration as a plain dictionary."""
        return {
            "name": self.name,
            "displayName": self.display_name,
            "helpUrl": self.help_url,
            "iconUrl": self.icon_url,
            "fields": [spec.to_schema() for spec in self.fields],
        }


PARTNER_USER_ID_FIELD = ConfigField(
    "partner-user-id",
    display_name="User ID",
    description="The Expensify partner user id used to connect to the Expensify API.",
    required=True,
    is_secret=True,
)

PARTNER_USER_SECRET_FIELD = ConfigField(
    "partner-user-secret",
    display_name="User Secret",
    description="The Expensify partner user secret used to connect to the Expensify API.",
    required=True,
    is_secret=True,
)

CONFIG = Configuration(
    name="expensify",
    fields=(PARTNER_USER_ID_FIELD, PARTNER_USER_SECRET_FIELD),
    display_name="Expensify",
    help_url="/docs/baton/expensify",
    icon_url="/static/app-icons/expensify.svg",
)