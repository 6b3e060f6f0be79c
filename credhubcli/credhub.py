"""Credential and permission operations of the CredHub API."""

from __future__ import annotations

import json
from typing import Any, Mapping

import requests
from packaging.version import Version

from credhubcli.client import Client, CredHubError
from credhubcli.errors import ServerDoesNotSupportMetadataError
from credhubcli.types import Permission, V1Permission

_METADATA_MIN_VERSION = Version("2.6.0")
_UNSUPPORTED_VERSION_MESSAGE = "credhub server version <2.0 not supported"


def supports_metadata(version: Version) -> bool:
    """Tell whether a server of this version accepts credential metadata."""
    return version >= _METADATA_MIN_VERSION


def _decode(response: requests.Response) -> Any:
    return json.loads(response.content)


def _decode_object(response: requests.Response) -> Mapping[str, Any]:
    document = _decode(response)
    if not isinstance(document, Mapping):
        raise ValueError("expected a JSON object in the response")
    return document


class CredHub(Client):
    """A CredHub API client with credential and permission operations."""

    def _is_older_than_v2(self) -> bool:
        return self.server_version().major < 2

    def _require_v2(self) -> None:
        if self._is_older_than_v2():
            raise CredHubError(_UNSUPPORTED_VERSION_MESSAGE)

    # Permissions

    def get_permissions(self, name: str) -> list[V1Permission]:
        """Return the version 1 permissions on the named credential."""
        response = self.request(
            "GET", "/api/v1/permissions", {"credential_name": name}, None, True
        )
        document = _decode_object(response)
        return [V1Permission.from_dict(item) for item in document.get("permissions") or []]

    def get_permission_by_uuid(self, uuid: str) -> Permission:
        """Return the permission with the given identifier."""
        response = self.request("GET", "/api/v2/permissions/" + uuid, None, None, True)
        return Permission.from_dict(_decode_object(response))

    def get_permission_by_path_actor(self, path: str, actor: str) -> Permission:
        """Return the permission granted to actor on path."""
        response = self.request(
            "GET", "/api/v2/permissions", {"actor": actor, "path": path}, None, True
        )
        return Permission.from_dict(_decode_object(response))

    def add_permission(self, path: str, actor: str, ops: list[str]) -> Permission | None:
        """Grant operations on path to actor.

        Servers older than 2.0 use the version 1 endpoint, which returns nothing.
        """
        if self._is_older_than_v2():
            body = {
                "credential_name": path,
                "permissions": [V1Permission(actor=actor, operations=list(ops)).to_dict()],
            }
            self.request("POST", "/api/v1/permissions", None, body, True)
            return None

        body = {"path": path, "actor": actor, "operations": list(ops)}
        response = self.request("POST", "/api/v2/permissions", None, body, True)
        return Permission.from_dict(_decode_object(response))

    def update_permission(
        self, uuid: str, path: str, actor: str, ops: list[str]
    ) -> Permission:
        """Replace the permission with the given identifier."""
        self._require_v2()
        body = {"path": path, "actor": actor, "operations": list(ops)}
        response = self.request("PUT", "/api/v2/permissions/" + uuid, None, body, True)
        return Permission.from_dict(_decode_object(response))

    def delete_permission(self, uuid: str) -> Permission:
        """Delete the permission with the given identifier and return it."""
        self._require_v2()
        response = self.request("DELETE", "/api/v2/permissions/" + uuid, None, None, True)
        return Permission.from_dict(_decode_object(response))

    # Regeneration

    def regenerate(self, name: str, metadata: Mapping[str, Any] | None = None) -> Any:
        """Generate a new version of a credential with its existing parameters."""
        body: dict[str, Any] = {"name": name, "regenerate": True}
        version = self.server_version()
        if metadata is not None and not supports_metadata(version):
            raise ServerDoesNotSupportMetadataError()
        if metadata:
            body["metadata"] = dict(metadata)
        response = self.request("POST", "/api/v1/data", None, body, True)
        return _decode(response)

    # Setting values

    def set_value(self, name: str, value: Any, metadata: Mapping[str, Any] | None = None) -> Any:
        """Set a value credential."""
        return self.set_credential(name, "value", value, metadata)

    def set_json(self, name: str, value: Any, metadata: Mapping[str, Any] | None = None) -> Any:
        """Set a JSON credential."""
        return self.set_credential(name, "json", value, metadata)

    def set_password(
        self, name: str, value: Any, metadata: Mapping[str, Any] | None = None
    ) -> Any:
        """Set a password credential."""
        return self.set_credential(name, "password", value, metadata)

    def set_user(self, name: str, value: Any, metadata: Mapping[str, Any] | None = None) -> Any:
        """Set a user credential."""
        return self.set_credential(name, "user", value, metadata)

    def set_certificate(
        self, name: str, value: Any, metadata: Mapping[str, Any] | None = None
    ) -> Any:
        """Set a certificate credential."""
        return self.set_credential(name, "certificate", value, metadata)

    def set_rsa(self, name: str, value: Any, metadata: Mapping[str, Any] | None = None) -> Any:
        """Set an RSA credential."""
        return self.set_credential(name, "rsa", value, metadata)

    def set_ssh(self, name: str, value: Any, metadata: Mapping[str, Any] | None = None) -> Any:
        """Set an SSH credential."""
        return self.set_credential(name, "ssh", value, metadata)

    def set_credential(
        self,
        name: str,
        cred_type: str,
        value: Any,
        metadata: Mapping[str, Any] | None = None,
    ) -> Any:
        """Set a credential of any type and return the stored credential."""
        body: dict[str, Any] = {"name": name, "type": cred_type, "value": value}
        version = self.server_version()
        if version.major < 2:
            body["mode"] = "overwrite"
        if metadata is not None and not supports_metadata(version):
            raise ServerDoesNotSupportMetadataError()
        if metadata:
            body["metadata"] = dict(metadata)
        response = self.request("PUT", "/api/v1/data", None, body, True)
        return _decode(response)