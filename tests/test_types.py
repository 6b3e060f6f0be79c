import pytest

from credhubcli.types import (
    GenerationParameters,
    Info,
    Mode,
    Permission,
    V1Permission,
    VersionData,
)


def test_mode_values():
    assert Mode.OVERWRITE.value == "overwrite"
    assert Mode("no-overwrite") is Mode.NO_OVERWRITE
    assert Mode.CONVERGE == "converge"


def test_permission_from_server_payload():
    payload = {
        "actor": "user:A",
        "operations": ["read"],
        "path": "/example-password",
        "uuid": "1234",
    }
    assert Permission.from_dict(payload) == Permission(
        actor="user:A", operations=["read"], path="/example-password", uuid="1234"
    )


def test_permission_missing_fields_are_empty():
    permission = Permission.from_dict({"actor": "user:B", "path": "/example-password"})
    assert permission.uuid == ""
    assert permission.operations == []


def test_permission_round_trip():
    original = Permission(actor="user:B", operations=["read", "write"], path="/p", uuid="42")
    assert Permission.from_dict(original.to_dict()) == original


def test_permission_keys_match_case_insensitively():
    assert Permission.from_dict({"Actor": "user:A"}).actor == "user:A"


def test_permission_rejects_wrong_types():
    with pytest.raises(ValueError):
        Permission.from_dict({"actor": 5})
    with pytest.raises(ValueError):
        Permission.from_dict({"operations": "read"})


def test_permission_rejects_non_object():
    with pytest.raises(ValueError):
        Permission.from_dict(["actor"])


def test_v1_permission_round_trip():
    original = V1Permission(actor="some-actor", operations=["read", "write"])
    assert original.to_dict() == {"actor": "some-actor", "operations": ["read", "write"]}
    assert V1Permission.from_dict(original.to_dict()) == original


def test_info_from_server_payload():
    info = Info.from_dict(
        {
            "auth-server": {"url": "https://uaa.example.com:8443"},
            "app": {"name": "CredHub", "version": "1.2.3"},
        }
    )
    assert info.app.name == "CredHub"
    assert info.app.version == "1.2.3"
    assert info.auth_server.url == "https://uaa.example.com:8443"


def test_info_from_empty_object():
    info = Info.from_dict({})
    assert info.auth_server.url == ""
    assert info.app.version == ""


def test_version_data_from_payload():
    assert VersionData.from_dict({"version": "1.2.3"}).version == "1.2.3"


def test_generation_parameters_omit_empty_values():
    assert not GenerationParameters().to_dict()


def test_generation_parameters_keep_set_values():
    params = GenerationParameters(
        length=30, include_special=True, alternative_names=["a.example.com"]
    )
    assert params.to_dict() == {
        "include_special": True,
        "length": 30,
        "alternative_names": ["a.example.com"],
    }


def test_generation_parameters_output_is_a_copy():
    params = GenerationParameters(key_usage=["digital_signature"])
    params.to_dict()["key_usage"].append("key_encipherment")
    assert params.key_usage == ["digital_signature"]