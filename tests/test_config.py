import pytest

from batonexpensify.config import CONFIG, ConfigError, ConfigField, Configuration, ExpensifyConfig


def test_resolve_with_dashed_keys():
    cfg = CONFIG.resolve({"partner-user-id": "uid", "partner-user-secret": "secret"})
    assert cfg == ExpensifyConfig(partner_user_id="uid", partner_user_secret="secret")


def test_resolve_with_underscore_keys():
    cfg = CONFIG.resolve({"partner_user_id": "uid", "partner_user_secret": "secret"})
    assert cfg.partner_user_id == "uid"
    assert cfg.partner_user_secret == "secret"


def test_resolve_missing_required():
    with pytest.raises(ConfigError, match="partner-user-secret"):
        CONFIG.resolve({"partner-user-id": "uid"})


def test_resolve_empty_required():
    with pytest.raises(ConfigError, match="partner-user-id"):
        CONFIG.resolve({"partner-user-id": "", "partner-user-secret": "secret"})


def test_resolve_rejects_non_string():
    with pytest.raises(ConfigError):
        CONFIG.resolve({"partner-user-id": 5, "partner-user-secret": "secret"})


def test_repr_hides_secrets():
    cfg = CONFIG.resolve({"partner-user-id": "uid", "partner-user-secret": "secret"})
    assert "secret" not in repr(cfg)
    assert "uid" not in repr(cfg)


def test_schema_matches_source():
    schema = CONFIG.to_schema()
    assert schema["name"] == "expensify"
    assert schema["displayName"] == "Expensify"
    assert schema["helpUrl"] == "/docs/baton/expensify"
    assert schema["iconUrl"] == "/static/app-icons/expensify.svg"
    assert [f["name"] for f in schema["fields"]] == ["partner-user-id", "partner-user-secret"]
    assert [f["displayName"] for f in schema["fields"]] == ["User ID", "User Secret"]
    assert all(f["required"] and f["isSecret"] for f in schema["fields"])


def test_default_used_for_optional_field():
    conf = Configuration(
        name="x",
        fields=(
            ConfigField("partner-user-id", required=True),
            ConfigField("partner-user-secret", default="secret"),
        ),
    )
    cfg = conf.resolve({"partner-user-id": "uid"})
    assert cfg.partner_user_secret == "secret"