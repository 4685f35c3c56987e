"""Syncers listing Expensify policies, their users, roles and role grants."""

from __future__ import annotations

import logging
from typing import Protocol

from batonexpensify.models import Policy, User
from batonexpensify.resources import (
    RESOURCE_TYPE_POLICY,
    RESOURCE_TYPE_USER,
    STATUS_ENABLED,
    Entitlement,
    Grant,
    Resource,
    ResourceId,
    UserTrait,
)

logger = logging.getLogger(__name__)

ROLES = {
    "admin": "admin",
    "auditor": "auditor",
    "user": "user",
}


class _PolicySource(Protocol):
    def get_policies(self) -> list[Policy]: ...

    def get_policy_employees(self, policy_id: str) -> list[User]: ...


def user_resource(user: User, parent_id: ResourceId | None) -> Resource:
    """Build a user resource; the email serves as the id since the API has none."""
    trait = UserTrait(
        email=user.email,
        email_is_primary=True,
        status=STATUS_ENABLED,
        profile={"login": user.email, "user_id": user.email},
    )
    return Resource(user.email, RESOURCE_TYPE_USER, user.email, parent_id, (), trait)


def policy_resource(policy: Policy) -> Resource:
    """Build a policy resource that has users as children."""
    return Resource(policy.name, RESOURCE_TYPE_POLICY, policy.id, None, (RESOURCE_TYPE_USER.id,), None)


def _role_entitlement(resource: Resource, role: str) -> Entitlement:
    return Entitlement(
        resource=resource,
        slug=role,
        display_name=f"{resource.display_name} Policy {role}",
        description=f"Role in {resource.display_name} Expensify policy",
        grantable_to=(RESOURCE_TYPE_USER,),
    )


class PolicySyncer:
    """Lists policies, their role entitlements and the role grants."""

    resource_type = RESOURCE_TYPE_POLICY

    def __init__(self, client: _PolicySource) -> None:
        self._client = client

    def list(self, parent_id: ResourceId | None = None) -> list[Resource]:
        return [policy_resource(policy) for policy in self._client.get_policies()]

    def entitlements(self, resource: Resource) -> list[Entitlement]:
        return [_role_entitlement(resource, role) for role in ROLES]

    def grants(self, resource: Resource) -> list[Grant]:
        grants = []
        for employee in self._client.get_policy_employees(resource.id.resource):
            role = ROLES.get(employee.role)
            if role is None:
                logger.warning(
                    "Unknown Expensify role name %r for user %s, skipping",
                    employee.role,
                    employee.email,
                )
                continue
            principal = user_resource(employee, resource.id)
            grants.append(Grant(_role_entitlement(resource, role), principal.id))
        return grants


class UserSyncer:
    """Lists the users of a policy."""

    resource_type = RESOURCE_TYPE_USER

    def __init__(self, client: _PolicySource) -> None:
        self._client = client

    def list(self, parent_id: ResourceId | None = None) -> list[Resource]:
        if parent_id is None:
            return []
        users = self._client.get_policy_employees(parent_id.resource)
        return [user_resource(user, parent_id) for user in users]

    def entitlements(self, resource: Resource) -> list[Entitlement]:
        return []

    def grants(self, resource: Resource) -> list[Grant]:
        return []