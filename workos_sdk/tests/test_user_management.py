"""User Management endpoint tests over ``httpx.MockTransport``."""
from __future__ import annotations

import json

import httpx
import pytest

from workos_sdk import IpAddrParseError, OperationError, RequestError, UnauthorizedError
from workos_sdk.base.errors import ErrorCode
from workos_sdk.user_management import (
    AuthenticateErrorWithCode,
    AuthenticateErrorWithError,
    AuthenticateWithCodeParams,
    AuthenticateWithPasswordParams,
    CreatePasswordResetError,
    CreatePasswordResetParams,
    CreateUserParams,
    EnrollAuthFactorError,
    EnrollAuthFactorParams,
    ListUsersParams,
    OrganizationMembershipStatus,
    ResetPasswordError,
    ResetPasswordParams,
    UpdateUserParams,
)

API_KEY = "sk_example_123456789"  # pragma: allowlist secret - test fixture value
USER = {
    "object": "user",
    "id": "user_01E4ZCR3C56J083X43JQXF3JK5",
    "email": "marcelina.davis@example.com",
    "first_name": "Marcelina",
    "last_name": "Davis",
    "email_verified": True,
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
}
MEMBERSHIP = {
    "object": "organization_membership",
    "id": "om_01E4ZCR3C56J083X43JQXF3JK5",
    "user_id": USER["id"],
    "organization_id": "org_01E4ZCR3C56J083X43JQXF3JK5",
    "role": {"slug": "member"},
    "status": "inactive",
}
AUTHENTICATION = {
    "user": USER,
    "organization_id": "org_01H945H0YD4F97JN9MATX7BYAG",
    "access_token": "eyJhb.access",
    "refresh_token": "yAjhKk123NLIjdrBdGZPf8pLIDvK",
    "authentication_method": "Password",
}


def answer(status: int, body=None, seen=None):
    """Handler returning ``body`` with ``status``; requests are appended to ``seen``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    return handler


def test_get_user(make_workos):
    seen = []
    user = make_workos(answer(200, USER, seen)).user_management().get_user(USER["id"])
    assert user.email == "marcelina.davis@example.com"
    assert user.email_verified is True
    assert seen[0].url.path == f"/user_management/users/{USER['id']}"


def test_list_users_sends_default_order(make_workos):
    seen = []
    body = {"data": [USER], "list_metadata": {"before": None, "after": "user_02"}}
    page = make_workos(answer(200, body, seen)).user_management().list_users(
        ListUsersParams(organization_id="org_1", limit=10)
    )
    assert [u.id for u in page.data] == [USER["id"]]
    assert page.list_metadata.after == "user_02"
    params = seen[0].url.params
    assert params["order"] == "desc"
    assert params["organization_id"] == "org_1"
    assert params["limit"] == "10"
    assert "after" not in params


def test_create_and_update_user(make_workos):
    seen = []
    um = make_workos(answer(201, USER, seen)).user_management()
    um.create_user(CreateUserParams(email="marcelina.davis@example.com", password="i8uv6g34kd490s"))
    assert json.loads(seen[0].content) == {
        "email": "marcelina.davis@example.com",
        "password": "i8uv6g34kd490s",
    }

    um.update_user(USER["id"], UpdateUserParams(first_name="Marcy"))
    assert seen[1].method == "PUT"
    assert json.loads(seen[1].content) == {"first_name": "Marcy"}


def test_user_password_and_hash_are_exclusive():
    with pytest.raises(ValueError):
        CreateUserParams(email="a@example.com", password="x", password_hash="$2b$10$abc", password_hash_type="bcrypt")
    with pytest.raises(ValueError):
        UpdateUserParams(password_hash="$2b$10$abc")


def test_delete_user(make_workos):
    seen = []
    assert make_workos(answer(202, None, seen)).user_management().delete_user(USER["id"]) is None
    assert seen[0].method == "DELETE"


def test_get_user_identities(make_workos):
    body = [{"idp_id": "4F42ABDE-1E44-4B66-824A-5F733C037A6D", "type": "OAuth", "provider": "MicrosoftOAuth"}]
    identities = make_workos(answer(200, body)).user_management().get_user_identities(USER["id"])
    assert len(identities) == 1
    assert identities[0].provider == "MicrosoftOAuth"


def test_get_user_identities_bad_shape_is_request_error(make_workos):
    with pytest.raises(RequestError):
        make_workos(answer(200, {"data": []})).user_management().get_user_identities(USER["id"])


def test_create_password_reset_not_found(make_workos):
    body = {"code": "entity_not_found", "message": "User not found.", "entity_id": "test@example.com"}
    um = make_workos(answer(404, body)).user_management()
    with pytest.raises(OperationError) as excinfo:
        um.create_password_reset(CreatePasswordResetParams(email="test@example.com"))
    err = excinfo.value
    assert err.code is ErrorCode.OPERATION
    assert isinstance(err.error, CreatePasswordResetError)
    assert err.error.entity_id == "test@example.com"
    assert "entity_not_found: User not found." in str(err)


def test_create_password_reset_other_status_is_request_error(make_workos):
    um = make_workos(answer(500, {"message": "boom"})).user_management()
    with pytest.raises(RequestError, match="returned 500"):
        um.create_password_reset(CreatePasswordResetParams(email="test@example.com"))


def test_reset_password_error_with_issues(make_workos):
    seen = []
    body = {
        "code": "password_reset_error",
        "message": "Could not reset password.",
        "errors": [{"code": "password_too_weak", "message": "Password is too weak.", "warning": "Add another word."}],
    }
    um = make_workos(answer(400, body, seen)).user_management()
    with pytest.raises(OperationError) as excinfo:
        um.reset_password(ResetPasswordParams(token="stdbytoken", new_password="password"))
    assert isinstance(excinfo.value.error, ResetPasswordError)
    assert excinfo.value.error.errors[0].code == "password_too_weak"
    assert seen[0].url.path == "/user_management/password_reset/confirm"


def test_reset_password_unrecognized_body_is_request_error(make_workos):
    um = make_workos(answer(404, {"code": "something_else", "message": "?"})).user_management()
    with pytest.raises(RequestError, match="unrecognized error body"):
        um.reset_password(ResetPasswordParams(token="t", new_password="p"))


def test_reset_password_unauthorized(make_workos, recorder):
    um = make_workos(answer(401, {"message": "Unauthorized"})).user_management()
    with pytest.raises(UnauthorizedError):
        um.reset_password(ResetPasswordParams(token="t", new_password="p"))
    assert "unauthorized" in recorder.hooks()


def test_organization_memberships(make_workos):
    seen = []
    um = make_workos(answer(200, MEMBERSHIP, seen)).user_management()
    membership = um.deactivate_organization_membership(MEMBERSHIP["id"])
    assert membership.status is OrganizationMembershipStatus.INACTIVE
    assert membership.role.slug == "member"
    assert (seen[0].method, seen[0].url.path) == (
        "PUT",
        f"/user_management/organization_memberships/{MEMBERSHIP['id']}/deactivate",
    )

    listing = make_workos(answer(200, {"data": [MEMBERSHIP]})).user_management().list_organization_memberships()
    assert listing.data[0].id == MEMBERSHIP["id"]


def test_enroll_auth_factor(make_workos):
    seen = []
    body = {
        "challenge": {
            "object": "authentication_challenge",
            "id": "auth_challenge_01FVYZWQTZQ5VB6BC5MPG2EYC5",
            "authentication_factor_id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
            "expires_at": "2022-02-15T15:36:53.279Z",
            "created_at": "2022-02-15T15:26:53.274Z",
            "updated_at": "2022-02-15T15:26:53.274Z",
        },
        "factor": {
            "object": "authentication_factor",
            "id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
            "type": "totp",
            "totp": {"issuer": "Foo Corp", "user": "alan.turing@example.com", "qr_code": "data:image/png;base64,"},
            "created_at": "2022-02-15T15:14:19.392Z",
            "updated_at": "2022-02-15T15:14:19.392Z",
        },
    }
    um = make_workos(answer(201, body, seen)).user_management()
    result = um.enroll_auth_factor(
        EnrollAuthFactorParams(user_id=USER["id"], totp_issuer="Foo Corp", totp_user="alan.turing@example.com")
    )
    assert result.factor.id == result.challenge.authentication_factor_id
    assert seen[0].url.path == f"/user_management/users/{USER['id']}/auth_factors"
    assert json.loads(seen[0].content) == {
        "type": "totp",
        "totp_issuer": "Foo Corp",
        "totp_user": "alan.turing@example.com",
    }


def test_enroll_auth_factor_bad_request(make_workos):
    body = {"code": "invalid_totp_secret", "message": "TOTP secret is invalid."}
    um = make_workos(answer(400, body)).user_management()
    with pytest.raises(OperationError) as excinfo:
        um.enroll_auth_factor(EnrollAuthFactorParams(user_id=USER["id"], totp_secret="nope"))
    assert isinstance(excinfo.value.error, EnrollAuthFactorError)
    assert excinfo.value.error.code == "invalid_totp_secret"


def test_authenticate_with_password_sends_client_secret(make_workos):
    seen = []
    um = make_workos(answer(200, AUTHENTICATION, seen)).user_management()
    response = um.authenticate_with_password(
        AuthenticateWithPasswordParams(
            client_id="client_123",
            email="marcelina@example.com",
            password="i8uv6g34kd490s",
            ip_address="192.0.2.1",
        )
    )
    assert response.user.id == USER["id"]
    assert response.access_token == "eyJhb.access"

    request = seen[0]
    assert request.url.path == "/user_management/authenticate"
    assert "Authorization" not in request.headers
    assert json.loads(request.content) == {
        "client_secret": API_KEY,
        "grant_type": "password",
        "client_id": "client_123",
        "email": "marcelina@example.com",
        "password": "i8uv6g34kd490s",
        "ip_address": "192.0.2.1",
    }


def test_authenticate_with_code_grant_type(make_workos):
    seen = []
    um = make_workos(answer(200, AUTHENTICATION, seen)).user_management()
    um.authenticate_with_code(AuthenticateWithCodeParams(client_id="client_123", code="01E2RJ4C05B52KKZ8FSRDAP23J"))
    assert json.loads(seen[0].content)["grant_type"] == "authorization_code"


def test_authenticate_invalid_client_is_unauthorized(make_workos, recorder):
    body = {"error": "invalid_client", "error_description": "Invalid client secret."}
    um = make_workos(answer(400, body)).user_management()
    with pytest.raises(UnauthorizedError) as excinfo:
        um.authenticate_with_password(AuthenticateWithPasswordParams(client_id="c", email="e@x.io", password="p"))
    assert isinstance(excinfo.value.__cause__, OperationError)
    assert isinstance(excinfo.value.__cause__.error, AuthenticateErrorWithError)
    assert "unauthorized" in recorder.hooks()


def test_authenticate_error_with_code(make_workos):
    body = {
        "code": "email_verification_required",
        "message": "Email ownership must be verified before authentication.",
        "pending_authentication_token": "YQyCkYfuVw2mI3tzSrk2C1Y7S",
        "email": "marcelina.davis@example.com",
        "email_verification_id": "email_verification_01HYGGEB6FYMWQNWF3XDZG7VV3",
    }
    um = make_workos(answer(400, body)).user_management()
    with pytest.raises(OperationError) as excinfo:
        um.authenticate_with_password(AuthenticateWithPasswordParams(client_id="c", email="e@x.io", password="p"))
    error = excinfo.value.error
    assert isinstance(error, AuthenticateErrorWithCode)
    assert error.pending_authentication_token == "YQyCkYfuVw2mI3tzSrk2C1Y7S"


def test_authenticate_forbidden_with_error(make_workos):
    body = {"error": "sso_required", "error_description": "User must authenticate using one of the matching connections."}
    um = make_workos(answer(403, body)).user_management()
    with pytest.raises(OperationError) as excinfo:
        um.authenticate_with_password(AuthenticateWithPasswordParams(client_id="c", email="e@x.io", password="p"))
    assert str(excinfo.value.error) == "sso_required: User must authenticate using one of the matching connections."


def test_authenticate_server_error_is_request_error(make_workos):
    um = make_workos(answer(502, {"message": "bad gateway"})).user_management()
    with pytest.raises(RequestError):
        um.authenticate_with_password(AuthenticateWithPasswordParams(client_id="c", email="e@x.io", password="p"))


def test_authenticate_rejects_invalid_ip_address():
    with pytest.raises(IpAddrParseError) as excinfo:
        AuthenticateWithPasswordParams(client_id="c", email="e@x.io", password="p", ip_address="not-an-ip")
    assert excinfo.value.code is ErrorCode.IP_ADDR_PARSE


def test_authenticate_normalizes_ipv6_address():
    params = AuthenticateWithPasswordParams(
        client_id="c", email="e@x.io", password="p", ip_address="2001:DB8:0:0:0:0:0:1"
    )
    assert params.ip_address == "2001:db8::1"
