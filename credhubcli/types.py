"""Plain data types exchanged with the CredHub server."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Any, Mapping


class Mode(str, enum.Enum):
    """How a set request treats an existing credential."""

    OVERWRITE = "overwrite"
    NO_OVERWRITE = "no-overwrite"
    CONVERGE = "converge"


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find key exactly, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return None


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{what} must be an object")
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _strings(data: Mapping[str, Any], key: str) -> list[str]:
    value = _lookup(data, key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return list(value)


@dataclass
class Permission:
    """A permission granted to an actor on a credential path."""

    actor: str = ""
    operations: list[str] = field(default_factory=list)
    path: str = ""
    uuid: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Permission":
        data = _mapping(data, "permission")
        return cls(
            actor=_string(data, "actor"),
            operations=_strings(data, "operations"),
            path=_string(data, "path"),
            uuid=_string(data, "uuid"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "actor": self.actor,
            "operations": list(self.operations),
            "path": self.path,
            "uuid": self.uuid,
        }


@dataclass
class V1Permission:
    """A permission entry as used by the version 1 API."""

    actor: str = ""
    operations: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "V1Permission":
        data = _mapping(data, "permission")
        return cls(actor=_string(data, "actor"), operations=_strings(data, "operations"))

    def to_dict(self) -> dict[str, Any]:
        return {"actor": self.actor, "operations": list(self.operations)}


@dataclass
class AppInfo:
    """Name and version of the server application."""

    name: str = ""
    version: str = ""


@dataclass
class AuthServerInfo:
    """Location of the server's trusted authentication server."""

    url: str = ""


@dataclass
class Info:
    """Information published by the server at /info."""

    app: AppInfo = field(default_factory=AppInfo)
    auth_server: AuthServerInfo = field(default_factory=AuthServerInfo)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Info":
        data = _mapping(data, "info")
        app = _mapping(_lookup(data, "app"), "app")
        auth = _mapping(_lookup(data, "auth-server"), "auth-server")
        return cls(
            app=AppInfo(name=_string(app, "name"), version=_string(app, "version")),
            auth_server=AuthServerInfo(url=_string(auth, "url")),
        )


@dataclass
class VersionData:
    """The payload of the server's /version endpoint."""

    version: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "VersionData":
        return cls(version=_string(_mapping(data, "version data"), "version"))


@dataclass
class GenerationParameters:
    """Parameters for generating a credential; empty values are left out."""

    include_special: bool = False
    exclude_number: bool = False
    exclude_upper: bool = False
    exclude_lower: bool = False
    length: int = 0
    common_name: str = ""
    organization: str = ""
    organization_unit: str = ""
    locality: str = ""
    state: str = ""
    country: str = ""
    alternative_names: list[str] = field(default_factory=list)
    extended_key_usage: list[str] = field(default_factory=list)
    key_usage: list[str] = field(default_factory=list)
    key_length: int = 0
    duration: int = 0
    ca: str = ""
    self_sign: bool = False
    is_ca: bool = False
    ssh_comment: str = ""
    username: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value:
                result[item.name] = list(value) if isinstance(value, list) else value
        return result