"""Command line entry point: sync Expensify and write the result as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections import deque
from typing import Any, Sequence

import requests

from batonexpensify.client import ExpensifyError
from batonexpensify.config import CONFIG, ConfigError
from batonexpensify.connector import ExpensifyConnector, new_connector
from batonexpensify.resources import Entitlement, Grant, Resource, ResourceId, ResourceType

__version__ = "dev"

logger = logging.getLogger(__name__)


def sync(connector: ExpensifyConnector) -> dict[str, list[Any]]:
    """Walk every resource type, its children, entitlements and grants."""
    syncers = {s.resource_type.id: s for s in connector.resource_syncers()}
    resources: list[Resource] = []
    seen: set[ResourceId] = set()
    pending: deque[tuple[str, ResourceId | None]] = deque((type_id, None) for type_id in syncers)

    while pending:
        type_id, parent = pending.popleft()
        for res in syncers[type_id].list(parent):
            if res.id in seen:
                continue
            seen.add(res.id)
            resources.append(res)
            pending.extend(
                (child, res.id) for child in res.child_resource_types if child in syncers
            )

    entitlements: list[Entitlement] = []
    grants: list[Grant] = []
    for res in resources:
        if res.resource_type.skip_entitlements_and_grants:
            continue
        syncer = syncers[res.resource_type.id]
        entitlements.extend(syncer.entitlements(res))
        grants.extend(syncer.grants(res))

    return {
        "resource_types": [s.resource_type for s in syncers.values()],
        "resources": resources,
        "entitlements": entitlements,
        "grants": grants,
    }


def _id_json(rid: ResourceId | None) -> dict[str, str] | None:
    if rid is None:
        return None
    return {"resourceType": rid.resource_type, "resource": rid.resource}


def _type_json(rt: ResourceType) -> dict[str, Any]:
    return {
        "id": rt.id,
        "displayName": rt.display_name,
        "traits": list(rt.traits),
        "skipEntitlementsAndGrants": rt.skip_entitlements_and_grants,
    }


def _resource_json(res: Resource) -> dict[str, Any]:
    trait = res.user_trait
    return {
        "id": _id_json(res.id),
        "displayName": res.display_name,
        "parent": _id_json(res.parent_id),
        "childResourceTypes": list(res.child_resource_types),
        "userTrait": None
        if trait is None
        else {
            "email": trait.email,
            "emailIsPrimary": trait.email_is_primary,
            "status": trait.status,
            "profile": dict(trait.profile),
        },
    }


def _entitlement_json(ent: Entitlement) -> dict[str, Any]:
    return {
        "id": ent.id,
        "resource": _id_json(ent.resource.id),
        "slug": ent.slug,
        "displayName": ent.display_name,
        "description": ent.description,
        "grantableTo": [rt.id for rt in ent.grantable_to],
        "purpose": ent.purpose,
    }


def _grant_json(grant: Grant) -> dict[str, Any]:
    return {
        "id": grant.id,
        "entitlement": grant.entitlement.id,
        "principal": _id_json(grant.principal),
    }


def _result_json(result: dict[str, list[Any]]) -> dict[str, list[Any]]:
    return {
        "resourceTypes": [_type_json(rt) for rt in result["resource_types"]],
        "resources": [_resource_json(r) for r in result["resources"]],
        "entitlements": [_entitlement_json(e) for e in result["entitlements"]],
        "grants": [_grant_json(g) for g in result["grants"]],
    }


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baton-expensify",
        description=f"Sync users and policies from {CONFIG.display_name}.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    for spec in CONFIG.fields:
        parser.add_argument(f"--{spec.name}", dest=spec.attribute, help=spec.description)
    parser.add_argument("-f", "--file", default="-", help="where to write the sync result (- for stdout)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    raw = {}
    for spec in CONFIG.fields:
        value = getattr(args, spec.attribute)
        if value is None:
            value = os.environ.get("BATON_" + spec.attribute.upper())
        if value is not None:
            raw[spec.name] = value

    try:
        settings = CONFIG.resolve(raw)
        connector = new_connector(settings.partner_user_id, settings.partner_user_secret)
        connector.validate()
        document = json.dumps(_result_json(sync(connector)), indent=2)
        if args.file == "-":
            print(document)
        else:
            with open(args.file, "w", encoding="utf-8") as handle:
                handle.write(document + "\n")
    except (ConfigError, ExpensifyError, requests.RequestException, OSError) as exc:
        logger.error("error creating connector: %s", exc)
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())