"""Basic unit tests for the mammut package."""

from mammut import (
    AccessTokenRequired,
    ApiError,
    ApiErrorPayload,
    AsyncMastodon,
    ClientError,
    ClientIdRequired,
    ClientSecretRequired,
    CredentialRequired,
    DecodeError,
    HttpStatusError,
    MammutError,
    Mastodon,
    NetworkError,
    ProtocolError,
    ROUTES,
    Scopes,
    ServerError,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert Mastodon is not None
    assert AsyncMastodon is not None


def test_error_hierarchy():
    for cls in (NetworkError, ClientError, ServerError, ApiError, DecodeError, ProtocolError, CredentialRequired):
        assert issubclass(cls, MammutError)
    assert issubclass(ClientError, HttpStatusError)
    assert issubclass(ServerError, HttpStatusError)
    assert issubclass(AccessTokenRequired, CredentialRequired)
    assert issubclass(ClientIdRequired, CredentialRequired)
    assert issubclass(ClientSecretRequired, CredentialRequired)


def test_error_attributes():
    err = MammutError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    client = ClientError(404)
    assert client.status == 404
    assert client.code == "client_error"
    assert str(client) == "HTTP 404: Not Found"

    server = ServerError(503)
    assert server.status == 503
    assert server.details == {"status": 503}

    assert AccessTokenRequired().code == "access_token_required"
    assert ClientIdRequired().code == "client_id_required"
    assert ClientSecretRequired().code == "client_secret_required"


def test_api_error_message_prefers_description():
    err = ApiError(ApiErrorPayload(error="invalid_grant", error_description="The code has expired"))
    assert err.error == "invalid_grant"
    assert err.error_description == "The code has expired"
    assert str(err) == "The code has expired"

    bare = ApiError(ApiErrorPayload(error="Record not found"))
    assert bare.error_description is None
    assert str(bare) == "Record not found"


def test_scopes():
    assert str(Scopes.READ) == "read"
    assert Scopes.ALL.value == "read write follow"


def test_route_table():
    assert ROUTES["get_account"].path == "accounts/{id}"
    assert ROUTES["get_account"].placeholders == ("id",)
    assert ROUTES["favourites"].kind.value == "paginated"
    assert ROUTES["media"].classifies_status
    assert not ROUTES["get_status"].classifies_status
    assert not ROUTES["new_status"].classifies_status
    assert all(name == route.name for name, route in ROUTES.items())
