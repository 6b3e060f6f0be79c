import pytest

from credhubcli import errors


def test_network_error_quotes_cause():
    err = errors.NetworkError(ValueError("connection refused"))
    assert str(err) == (
        'Error connecting to the targeted API: "connection refused". '
        "Please validate your target and retry your request."
    )


def test_network_error_escapes_quotes_in_cause():
    err = errors.NetworkError(RuntimeError('say "hi"'))
    assert '"say \\"hi\\""' in str(err)


def test_network_error_keeps_cause():
    cause = OSError("down")
    assert errors.NetworkError(cause).cause is cause


def test_auth_server_network_error_message():
    err = errors.AuthServerNetworkError(ValueError("timeout"))
    assert str(err) == (
        'Error connecting to the auth server: "timeout". '
        "Please validate your target and retry your request."
    )


def test_uaa_error_prefixes_cause():
    assert str(errors.UAAError(ValueError("bad credentials"))) == "UAA error: bad credentials"


def test_unauthorized_message():
    assert str(errors.UnauthorizedError()) == "Unauthorized"


def test_no_credentials_tag_message():
    assert str(errors.NoCredentialsTagError()).startswith(
        "The referenced import file does not begin with the key 'credentials'."
    )


def test_revoked_and_refresh_share_message():
    assert str(errors.RevokedTokenError()) == str(errors.RefreshError())
    assert str(errors.RefreshError()) == (
        "You are not currently authenticated. Please log in to continue."
    )


def test_file_load_error_message():
    assert str(errors.FileLoadError()) == (
        "A referenced file could not be opened. Please validate the provided filenames "
        "and permissions, then retry your request."
    )


def test_user_name_only_valid_message():
    assert str(errors.UserNameOnlyValidForUserTypeError()) == (
        "Username parameter is not valid for this credential type."
    )


def test_server_does_not_support_metadata_message():
    assert "(requires >= 2.6.x)" in str(errors.ServerDoesNotSupportMetadataError())


def test_custom_message_overrides_default():
    assert str(errors.CatchAllError("override")) == "override"


@pytest.mark.parametrize(
    "error_class",
    [
        errors.CatchAllError,
        errors.FailedToImportError,
        errors.MissingGetParametersError,
        errors.InvalidImportYamlError,
        errors.InvalidImportJSONError,
        errors.OutputJSONAndQuietError,
    ],
)
def test_errors_are_catchable_as_cli_error(error_class):
    with pytest.raises(errors.CliError) as info:
        raise error_class()
    assert str(info.value) == error_class.message