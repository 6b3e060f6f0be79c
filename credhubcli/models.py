"""Bulk export and import of credentials."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from credhubcli.errors import (
    InvalidImportJSONError,
    InvalidImportYamlError,
    NoCredentialsTagError,
)


@dataclass
class CredentialBulkExport:
    """Serialized credentials, ready to be written out."""

    data: bytes

    def __str__(self) -> str:
        return self.data.decode("utf-8")


def _field(credential: Any, name: str) -> Any:
    if isinstance(credential, Mapping):
        return credential.get(name)
    return getattr(credential, name, None)


def export_credentials(credentials: Iterable[Any], output_json: bool) -> CredentialBulkExport:
    """Serialize credentials as YAML, or as JSON when output_json is set.

    Each credential keeps only its name, type, value and, when present, metadata.
    """
    entries = []
    for credential in credentials:
        entry = {
            "name": _field(credential, "name") or "",
            "type": _field(credential, "type") or "",
            "value": _field(credential, "value"),
        }
        metadata = _field(credential, "metadata")
        if metadata:
            entry["metadata"] = metadata
        entries.append(entry)

    if output_json:
        document = {
            "Credentials": [
                {key.capitalize(): value for key, value in entry.items()} for entry in entries
            ]
        }
        return CredentialBulkExport(json.dumps(document, separators=(",", ":")).encode("utf-8"))

    text = yaml.safe_dump(
        {"credentials": entries}, sort_keys=False, default_flow_style=False, allow_unicode=True
    )
    return CredentialBulkExport(text.encode("utf-8"))


def _unpack_key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        return format(Decimal(repr(key)).normalize(), "f")
    if isinstance(key, str):
        return key
    return str(key)


def _unpack(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {_unpack_key(key): _unpack(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_unpack(item) for item in value]
    return value


def _unpack_credential(credential: Mapping[Any, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {"overwrite": True}
    for key, value in credential.items():
        result[_unpack_key(key).lower()] = _unpack(value)
    return result


@dataclass
class CredentialBulkImport:
    """Credentials read from an import file."""

    credentials: list[dict[str, Any]] | None = field(default=None)

    def read_file(self, filepath: str | Path, import_json: bool) -> None:
        """Read and parse the import file at filepath."""
        self.read_bytes(Path(filepath).read_bytes(), import_json)

    def read_bytes(self, data: bytes | str, import_json: bool) -> None:
        """Parse import data as JSON or YAML and normalise each credential."""
        if import_json:
            invalid: type[Exception] = InvalidImportJSONError
            try:
                document = json.loads(data)
            except ValueError as exc:
                raise InvalidImportJSONError() from exc
        else:
            invalid = InvalidImportYamlError
            try:
                document = yaml.safe_load(data)
            except yaml.YAMLError as exc:
                raise InvalidImportYamlError() from exc

        if document is None:
            document = {}
        if not isinstance(document, Mapping):
            raise invalid()

        credentials = document.get("credentials")
        if credentials is None:
            raise NoCredentialsTagError()
        if not isinstance(credentials, list) or not all(
            isinstance(item, Mapping) for item in credentials
        ):
            raise invalid()

        self.credentials = [_unpack_credential(item) for item in credentials]