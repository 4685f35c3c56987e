import json

import pytest
import responses

from batonexpensify.cli import main, sync
from batonexpensify.client import BASE_URL
from batonexpensify.connector import ExpensifyConnector
from batonexpensify.models import Policy, User


class StubClient:
    def __init__(self, policies, employees):
        self.policies = policies
        self.employees = employees

    def get_policies(self):
        return list(self.policies)

    def get_policy_employees(self, policy_id):
        return list(self.employees.get(policy_id, []))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BATON_PARTNER_USER_ID", raising=False)
    monkeypatch.delenv("BATON_PARTNER_USER_SECRET", raising=False)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_sync_collects_resources_entitlements_and_grants():
    client = StubClient(
        [Policy(name="Team", id="P1"), Policy(name="Other", id="P2")],
        {
            "P1": [User(role="admin", email="a@example.com"), User(role="user", email="b@example.com")],
            "P2": [User(role="auditor", email="a@example.com")],
        },
    )
    result = sync(ExpensifyConnector(client))
    ids = [(r.id.resource_type, r.id.resource) for r in result["resources"]]
    assert ids.count(("user", "a@example.com")) == 1
    assert len(ids) == len(set(ids))
    assert {rid for rid in ids if rid[0] == "policy"} == {("policy", "P1"), ("policy", "P2")}
    assert all(e.resource.resource_type.id == "policy" for e in result["entitlements"])
    assert len(result["entitlements"]) == 2 * 3
    assert sorted((g.entitlement.resource.id.resource, g.entitlement.slug) for g in result["grants"]) == [
        ("P1", "admin"),
        ("P1", "user"),
        ("P2", "auditor"),
    ]
    assert [rt.id for rt in result["resource_types"]] == ["user", "policy"]


def test_main_without_credentials_fails(capsys):
    assert main([]) == 1
    assert "partner-user-id" in capsys.readouterr().err


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "dev" in capsys.readouterr().out


def test_main_writes_sync_result(mocked, tmp_path):
    mocked.add(
        responses.POST,
        BASE_URL,
        json={"policyList": [{"name": "Team", "id": "P1"}], "responseCode": 200},
    )
    mocked.add(
        responses.POST,
        BASE_URL,
        json={"policyList": [{"name": "Team", "id": "P1"}], "responseCode": 200},
    )
    mocked.add(
        responses.POST,
        BASE_URL,
        json={
            "policyInfo": {"P1": {"employees": [{"email": "a@example.com", "role": "admin"}]}},
            "responseCode": 200,
        },
    )
    out = tmp_path / "sync.json"
    partner_user_secret = "secret"
    code = main(
        [
            "--partner-user-id",
            "partner-id",
            "--partner-user-secret",
            partner_user_secret,
            "--file",
            str(out),
        ]
    )
    assert code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["resources"]) == 2
    assert data["grants"][0]["principal"] == {"resourceType": "user", "resource": "a@example.com"}
    assert sorted(e["slug"] for e in data["entitlements"]) == ["admin", "auditor", "user"]


def test_main_reports_api_error(mocked, capsys):
    mocked.add(
        responses.POST,
        BASE_URL,
        json={"responseCode": 401, "responseMessage": "Authentication failed"},
    )
    assert main(["--partner-user-id", "partner-id", "--partner-user-secret", "secret"]) == 1
    assert "Authentication failed" in capsys.readouterr().err