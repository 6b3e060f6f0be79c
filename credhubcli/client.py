"""HTTP client for the CredHub API."""

from __future__ import annotations

import json
import os
import re
import ssl
from typing import Any, Callable, Mapping, Protocol
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
from packaging.version import Version
from requests.adapters import HTTPAdapter

from credhubcli.types import Info, VersionData

_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


class CredHubError(Exception):
    """An error reported by the CredHub server."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CredHubError):
    """The server reported that the resource does not exist."""


class Strategy(Protocol):
    def do(self, request: requests.PreparedRequest) -> requests.Response: ...


def _parse_url(raw: str) -> str:
    if raw.startswith(":"):
        raise ValueError(f"parse {raw!r}: missing protocol scheme")
    if not _SCHEME_RE.match(raw):
        first_segment = raw.split("/", 1)[0]
        if ":" in first_segment:
            raise ValueError(f"parse {raw!r}: first path segment in URL cannot contain colon")
    urlsplit(raw)
    return raw


class _ContextAdapter(HTTPAdapter):
    def __init__(self, context: ssl.SSLContext, **kwargs: Any) -> None:
        self._context = context
        super().__init__(**kwargs)

    def init_poolmanager(self, *args: Any, **kwargs: Any) -> None:
        kwargs["ssl_context"] = self._context
        super().init_poolmanager(*args, **kwargs)


class HttpStrategy:
    """Sends requests without authentication, honouring the client's TLS settings."""

    def __init__(self, config: "Client") -> None:
        self.config = config
        self.session = requests.Session()
        if config.ssl_context is not None:
            self.session.mount("https://", _ContextAdapter(config.ssl_context))

    def do(self, request: requests.PreparedRequest) -> requests.Response:
        return self.session.send(
            request,
            timeout=self.config.http_timeout,
            verify=not self.config.skip_tls_validation,
        )


def _debug() -> bool:
    return os.environ.get("CREDHUB_DEBUG") == "true"


class Client:
    """A CredHub API client bound to one target server."""

    def __init__(
        self,
        target: str,
        *,
        auth: Callable[["Client"], Strategy] | None = None,
        auth_url: str | None = None,
        ca_certs: list[str] | tuple[str, ...] | None = None,
        skip_tls_validation: bool = False,
        client_cert: tuple[str, str] | None = None,
        http_timeout: float | None = None,
        server_version: str | None = None,
    ) -> None:
        self.api_url = _parse_url(target)
        self._auth_url = _parse_url(auth_url) if auth_url else None
        self.skip_tls_validation = skip_tls_validation
        self.http_timeout = http_timeout
        self._cached_server_version = server_version or ""
        self.ssl_context: ssl.SSLContext | None = None

        if ca_certs is not None or client_cert is not None:
            context = ssl.create_default_context()
            for cert in ca_certs or ():
                try:
                    context.load_verify_locations(cadata=cert)
                except (ssl.SSLError, ValueError) as exc:
                    raise ValueError("provided ca certs are invalid") from exc
            if client_cert is not None:
                context.load_cert_chain(client_cert[0], client_cert[1])
            if skip_tls_validation:
                context.check_hostname = False
                context.verify_mode = ssl.CERT_NONE
            self.ssl_context = context

        builder = auth if auth is not None else HttpStrategy
        self.auth = builder(self)

    def _plain_strategy(self) -> HttpStrategy:
        return HttpStrategy(self)

    def request(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        check_server_error: bool = True,
    ) -> requests.Response:
        """Send an authenticated request; path is the full path such as /api/v1/data."""
        return self._send(self.auth, method, path, query, body, check_server_error)

    def _send(
        self,
        strategy: Strategy,
        method: str,
        path: str,
        query: Mapping[str, Any] | None,
        body: Any,
        check_server_error: bool,
    ) -> requests.Response:
        parts = urlsplit(self.api_url)
        encoded = urlencode(sorted((query or {}).items()), doseq=True)
        url = urlunsplit((parts.scheme, parts.netloc, path, encoded, ""))

        data = json.dumps(body).encode("utf-8") if body is not None else None
        if not _METHOD_RE.match(method):
            raise ValueError(f"invalid method {method!r}")

        prepared = requests.Request(
            method, url, data=data, headers={"Content-Type": "application/json"}
        ).prepare()

        if _debug():
            print("[DEBUG]", prepared.method, prepared.url, dict(prepared.headers), prepared.body)

        try:
            response = strategy.do(prepared)
        except Exception as exc:
            if _debug():
                print(f"[DEBUG] An error occurred during the data request.\n: {exc}")
            raise

        if _debug():
            print("[DEBUG]", response.status_code, dict(response.headers), response.content)

        if check_server_error:
            self._check_for_server_error(response)
        return response

    @staticmethod
    def _check_for_server_error(response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return
        try:
            content = response.content
        except Exception as exc:
            raise CredHubError(f"The response body could not be read: {exc}") from exc
        error_class = NotFoundError if response.status_code == 404 else CredHubError
        try:
            document = json.loads(content)
        except ValueError as exc:
            raise CredHubError(f"The response body could not be decoded: {exc}") from exc
        message = document.get("error", "") if isinstance(document, dict) else ""
        raise error_class(message if isinstance(message, str) else str(message))

    def info(self) -> Info:
        """Fetch the server information from /info without authentication."""
        response = self._send(self._plain_strategy(), "GET", "/info", None, None, True)
        return Info.from_dict(json.loads(response.content))

    def auth_url(self) -> str:
        """Return the trusted authentication server URL."""
        if self._auth_url is not None:
            return self._auth_url
        url = self.info().auth_server.url
        if not url:
            raise CredHubError("AuthURL not found")
        return url

    def server_version(self) -> Version:
        """Return the server version, from the configured value, /info or /version."""
        if self._cached_server_version:
            return Version(self._cached_server_version)
        raw = self.info().app.version
        if not raw:
            response = self.request("GET", "/version")
            raw = VersionData.from_dict(json.loads(response.content)).version
        return Version(raw)

    def interpolate_string(self, vcap_services_body: str) -> str:
        """Resolve credhub-ref entries in a VCAP_SERVICES document."""
        if '"credhub-ref"' not in vcap_services_body:
            return vcap_services_body
        document = json.loads(vcap_services_body)
        if not isinstance(document, dict):
            raise ValueError("VCAP_SERVICES must be a JSON object")
        response = self.request("POST", "/api/v1/interpolate", None, document, True)
        self._check_for_server_error(response)
        return response.content.decode("utf-8")