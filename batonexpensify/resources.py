"""Resource types, resources, entitlements and grants the connector emits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

TRAIT_USER = "user"
STATUS_ENABLED = "enabled"
PURPOSE_PERMISSION = "permission"


@dataclass(frozen=True)
class ResourceType:
    """A kind of resource the connector can sync."""

    id: str
    display_name: str
    traits: tuple[str, ...] = ()
    skip_entitlements_and_grants: bool = False


@dataclass(frozen=True)
class ResourceId:
    """Identifies one resource: its type id and its object id."""

    resource_type: str
    resource: str


@dataclass(frozen=True)
class UserTrait:
    """User details attached to a resource of a user type."""

    email: str
    email_is_primary: bool = True
    status: str = STATUS_ENABLED
    profile: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Resource:
    """A synced object such as a policy or a user."""

    display_name: str
    resource_type: ResourceType
    object_id: str
    parent_id: ResourceId | None = None
    child_resource_types: Iterable[str] = ()
    user_trait: UserTrait | None = None
    id: ResourceId = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "child_resource_types", tuple(self.child_resource_types))
        object.__setattr__(self, "id", ResourceId(self.resource_type.id, self.object_id))


@dataclass(frozen=True)
class Entitlement:
    """Something on a resource that can be granted to a principal."""

    resource: Resource
    slug: str
    display_name: str = ""
    description: str = ""
    grantable_to: tuple[ResourceType, ...] = ()
    purpose: str = PURPOSE_PERMISSION

    @property
    def id(self) -> str:
        return f"{self.resource.id.resource_type}:{self.resource.id.resource}:{self.slug}"


@dataclass(frozen=True)
class Grant:
    """An entitlement held by a principal."""

    entitlement: Entitlement
    principal: ResourceId

    @property
    def id(self) -> str:
        return f"{self.entitlement.id}:{self.principal.resource_type}:{self.principal.resource}"


RESOURCE_TYPE_USER = ResourceType(
    id="user",
    display_name="User",
    traits=(TRAIT_USER,),
    skip_entitlements_and_grants=True,
)

RESOURCE_TYPE_POLICY = ResourceType(id="policy", display_name="Policy")