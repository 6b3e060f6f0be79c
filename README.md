# credhubcli

A Python client library for the CredHub credential management API. It sends
requests to a CredHub server, sets and regenerates credentials, manages
permissions, interpolates `VCAP_SERVICES` documents, and reads and writes the
bulk import/export file format.

## Installation

```
pip install credhubcli
```

## Connecting to a server

`credhubcli.credhub.CredHub` extends `credhubcli.client.Client` with the
credential and permission operations.

```python
from credhubcli.credhub import CredHub

ch = CredHub("https://credhub.example.com:8844", server_version="2.6.0")

info = ch.info()            # GET /info, sent without authentication
print(info.app.name, info.auth_server.url)
print(ch.auth_url())
print(ch.server_version())  # a packaging.version.Version
```

Keyword options of the constructor:

- `auth` – a callable that receives the client and returns an object with a
  `do(prepared_request)` method returning a `requests.Response`. It is used
  for every request sent through `request()`. By default `HttpStrategy` is
  used, which sends requests without authentication.
- `auth_url` – the authentication server URL; when given, `auth_url()`
  returns it without contacting the server.
- `ca_certs` – a list of PEM-encoded CA certificates added to the system
  trust store; an invalid certificate raises `ValueError`.
- `skip_tls_validation` – turn off certificate verification.
- `client_cert` – a `(certificate_path, key_path)` pair for mutual TLS.
- `http_timeout` – request timeout in seconds.
- `server_version` – the server version to assume. When not given, it is
  read from `/info`, falling back to `/version`.

An invalid target or `auth_url` raises `ValueError`.

`request(method, path, query, body, check_server_error)` sends an
authenticated request to the given full path (for example `/api/v1/data`),
with `body` encoded as JSON. When `check_server_error` is true, a status
outside 2xx raises `CredHubError`, or `NotFoundError` for 404, carrying the
`error` message from the response body.

## Credentials

```python
ch.set_value("/demo/value", "some-value", None)
ch.set_json("/demo/json", {"key": "value"}, {"owner": "team-a"})
ch.set_user("/demo/user", {"username": "someone", "password": "password"}, None)

cred = ch.regenerate("/demo/generated", None)
```

There are also `set_password`, `set_certificate`, `set_rsa`, `set_ssh` and
the general `set_credential(name, cred_type, value, metadata)`. Each returns
the decoded JSON the server sends back. For servers older than 2.0 the
request carries `"mode": "overwrite"`.

Metadata needs a server at version 2.6.0 or later (see `supports_metadata`);
older servers raise `credhubcli.errors.ServerDoesNotSupportMetadataError`.

## Permissions

```python
perm = ch.add_permission("/demo/value", "uaa-user:some-user", ["read"])
ch.update_permission(perm.uuid, "/demo/value", "uaa-user:some-user", ["read", "write"])
ch.get_permission_by_path_actor("/demo/value", "uaa-user:some-user")
ch.get_permission_by_uuid(perm.uuid)
ch.delete_permission(perm.uuid)

ch.get_permissions("/demo/value")   # list of V1Permission
```

Permissions are returned as `credhubcli.types.Permission`. On servers older
than 2.0, `add_permission` uses the version 1 endpoint and returns `None`,
and `update_permission` and `delete_permission` raise `CredHubError`.

## Interpolation

```python
resolved = ch.interpolate_string(vcap_services_json)
```

Documents without a `"credhub-ref"` are returned unchanged without contacting
the server; others must be JSON objects and are sent to
`/api/v1/interpolate`.

## Bulk import and export

```python
from credhubcli.models import CredentialBulkImport, export_credentials

bulk = CredentialBulkImport()
bulk.read_file("credentials.yml", False)   # True to read JSON
for cred in bulk.credentials:
    print(cred["name"], cred["type"], cred["overwrite"])

exported = export_credentials(credentials, True)
print(str(exported))
```

Imported credentials have their top-level keys lower-cased, nested keys
turned into strings, and `overwrite` set to `True`. Malformed input raises
`InvalidImportJSONError` or `InvalidImportYamlError`; a document without a
`credentials` key raises `NoCredentialsTagError`.

`export_credentials` accepts mappings or objects with `name`, `type`, `value`
and `metadata`, and keeps only those fields (metadata only when present). The
YAML form uses a `credentials` key with lower-case field names; the JSON form
uses `Credentials` with capitalised field names.

## Other modules

- `credhubcli.errors` – user-facing error classes, all derived from
  `CliError`.
- `credhubcli.types` – `Mode`, `Permission`, `V1Permission`, `Info`,
  `VersionData` and `GenerationParameters`.
- `credhubcli.util` – `read_file_or_string_from_field`,
  `add_default_scheme_if_necessary`, `token_is_present`, and `warning` and
  `error` for coloured messages on standard error.

## Debugging

Set `CREDHUB_DEBUG=true` to print each request and response.

## What this package does not do

It is a library only: it installs no `credhub` command. It provides no login
or token handling against an authentication server (supply your own `auth`
strategy), no stored configuration, no proxy support, and no operations for
getting, finding, generating or deleting credentials.