"""Error types reported to users of the command-line client."""

from __future__ import annotations

import json


def _quote(text: str) -> str:
    """Render text as a double-quoted literal with escapes."""
    return json.dumps(text, ensure_ascii=False)


class CliError(Exception):
    """Base class for errors whose message is shown to the user."""

    message: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.message if message is None else message)


class NetworkError(CliError):
    """The targeted API could not be reached."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(
            f"Error connecting to the targeted API: {_quote(str(cause))}. "
            "Please validate your target and retry your request."
        )


class AuthServerNetworkError(CliError):
    """The auth server could not be reached."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(
            f"Error connecting to the auth server: {_quote(str(cause))}. "
            "Please validate your target and retry your request."
        )


class CatchAllError(CliError):
    message = "The targeted API was unable to perform the request. Please validate and retry your request."


class FailedToImportError(CliError):
    message = "One or more credentials failed to import."


class RevokedTokenError(CliError):
    message = "You are not currently authenticated. Please log in to continue."


class FileLoadError(CliError):
    message = (
        "A referenced file could not be opened. Please validate the provided filenames "
        "and permissions, then retry your request."
    )


class MissingGetParametersError(CliError):
    message = "A name or ID must be provided. Please update and retry your request."


class MissingDeleteParametersError(CliError):
    message = "A name or path must be provided. Please update and retry your request."


class BulkDeleteFailureError(CliError):
    message = (
        "Some or all of the credential under the provided path could not be deleted. "
        "Please refer to the error output."
    )


class MissingInterpolateParametersError(CliError):
    message = "A file to interpolate must be provided. Please add a file flag and try again."


class MixedAuthorizationParametersError(CliError):
    message = (
        "Client, password, SSO and/or SSO passcode credentials may not be combined. "
        "Please update and retry your request with a single login method."
    )


class PasswordAuthorizationParametersError(CliError):
    message = (
        "The combination of parameters in the request is not allowed. "
        "Please validate your input and retry your request."
    )


class ClientAuthorizationParametersError(CliError):
    message = (
        "Both client name and client secret must be provided to authenticate. "
        "Please update and retry your request."
    )


class RefreshError(CliError):
    message = "You are not currently authenticated. Please log in to continue."


class NoMatchingCredentialsFoundError(CliError):
    message = "No credentials exist which match the provided parameters."


class SetEmptyTypeError(CliError):
    message = (
        "A type must be specified when setting a credential. Valid types include "
        "'value', 'json', 'password', 'user', 'certificate', 'ssh' and 'rsa'."
    )


class GenerateEmptyTypeError(CliError):
    message = (
        "A type must be specified when generating a credential. Valid types include "
        "'password', 'user', 'certificate', 'ssh' and 'rsa'."
    )


class NoApiUrlSetError(CliError):
    message = (
        "An API target is not set. Please target the location of your server with "
        "`credhub api --server api.example.com` to continue."
    )


class InvalidImportYamlError(CliError):
    message = (
        "The referenced file does not contain valid yaml structure. "
        "Please update and retry your request."
    )


class InvalidImportJSONError(CliError):
    message = (
        "The referenced file does not contain valid json structure. "
        "Please update and retry your request."
    )


class NoCredentialsTagError(CliError):
    message = (
        "The referenced import file does not begin with the key 'credentials'. "
        "The import file must contain a list of credentials under the key 'credentials'. "
        "Please update and retry your request."
    )


class GetVersionAndKeyError(CliError):
    message = "The --versions flag and --key flag are incompatible."


class GetVersionsAndIDIncompatibleParametersError(CliError):
    message = "The --versions flag and --id flag are incompatible."


class OutputJSONAndQuietError(CliError):
    message = "The --output-json flag and --quiet flag are incompatible."


class UserNameOnlyValidForUserTypeError(CliError):
    message = "Username parameter is not valid for this credential type."


class UAAError(CliError):
    """An error reported by the UAA server."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__("UAA error: " + str(cause))


class InvalidJSONMetadataError(CliError):
    message = (
        "The argument for --metadata is not a valid json object. "
        "Please update and retry your request."
    )


class ServerDoesNotSupportMetadataError(CliError):
    message = (
        "The --metadata flag is not supported for this version of the credhub server "
        "(requires >= 2.6.x). Please remove the flag and retry your request."
    )


class UnauthorizedError(CliError):
    message = "Unauthorized"