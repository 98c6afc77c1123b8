"""Endpoint tests for organizations, directory sync, roles, admin portal and webhooks."""
from __future__ import annotations

import json

import httpx
import pytest

from workos_sdk import RequestError, UnauthorizedError, parse_webhook
from workos_sdk.admin_portal import AdminPortalIntent, GeneratePortalLinkParams
from workos_sdk.organizations import (
    CreateOrganizationParams,
    DomainData,
    DomainDataState,
    UpdateOrganizationParams,
)
from workos_sdk.roles import RoleType

ORGANIZATION = {
    "id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
    "object": "organization",
    "name": "Foo Corp",
    "allow_profiles_outside_organization": False,
    "external_id": "2fe01467-f7ea-4dd2-8b79-c2b4f56d0191",
    "metadata": {"tier": "diamond"},
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
    "domains": [
        {
            "object": "organization_domain",
            "id": "org_domain_01EHZNVPK2QXHMVWCEDQEKY69A",
            "domain": "foo-corp.com",
        }
    ],
}


class Route:
    """Answer one method/path with a canned response and keep the request."""

    def __init__(self, method: str, path: str, status: int = 200, body=None) -> None:
        self.method = method
        self.path = path
        self.status = status
        self.body = body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        assert (request.method, request.url.path) == (self.method, self.path)
        self.requests.append(request)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.body)

    @property
    def sent_json(self):
        return json.loads(self.requests[-1].content)


def test_create_organization(make_workos):
    route = Route("POST", "/organizations", 201, ORGANIZATION)
    workos = make_workos(route)
    org = workos.organizations().create_organization(
        CreateOrganizationParams(
            name="Foo Corp",
            domain_data=[DomainData(domain="foo-corp.com", state=DomainDataState.PENDING)],
            metadata={"tier": "diamond"},
        )
    )
    assert org.id == "org_01EHZNVPK3SFK441A1RGBFSHRT"
    assert org.domains[0].domain == "foo-corp.com"
    assert org.metadata == {"tier": "diamond"}
    assert route.requests[0].headers["Authorization"] == "Bearer sk_example_123456789"
    assert route.sent_json == {
        "name": "Foo Corp",
        "domain_data": [{"domain": "foo-corp.com", "state": "pending"}],
        "metadata": {"tier": "diamond"},
    }


def test_get_and_update_organization(make_workos):
    get_route = Route("GET", "/organizations/org_01EHZNVPK3SFK441A1RGBFSHRT", 200, ORGANIZATION)
    org = make_workos(get_route).organizations().get_organization("org_01EHZNVPK3SFK441A1RGBFSHRT")
    assert org.name == "Foo Corp"

    update_route = Route("PUT", "/organizations/org_01EHZNVPK3SFK441A1RGBFSHRT", 200, ORGANIZATION)
    make_workos(update_route).organizations().update_organization(
        UpdateOrganizationParams(organization_id="org_01EHZNVPK3SFK441A1RGBFSHRT", stripe_customer_id="cus_1")
    )
    assert update_route.sent_json == {"stripe_customer_id": "cus_1"}


def test_update_organization_external_id(make_workos):
    route = Route("PUT", "/organizations/org_1", 200, {**ORGANIZATION, "external_id": "external_12345"})
    org = make_workos(route).organizations().update_external_id("org_1", "external_12345")
    assert org.external_id == "external_12345"
    assert route.sent_json == {"external_id": "external_12345"}


def test_delete_organization(make_workos):
    route = Route("DELETE", "/organizations/org_1", 202)
    assert make_workos(route).organizations().delete_organization("org_1") is None


def test_organization_unauthorized(make_workos):
    route = Route("GET", "/organizations/org_1", 401, {"message": "Unauthorized"})
    with pytest.raises(UnauthorizedError):
        make_workos(route).organizations().get_organization("org_1")


def test_directory_sync(make_workos):
    directory = {"id": "directory_1", "organization_id": "org_1", "name": "Foo Corp", "type": "okta scim v2.0"}
    got = make_workos(Route("GET", "/directories/directory_1", 200, directory)).directory_sync().get_directory(
        "directory_1"
    )
    assert got.organization_id == "org_1"

    user = {"id": "directory_user_1", "directory_id": "directory_1", "email": "marcelina@foo-corp.com"}
    users = make_workos(Route("GET", "/directory_users/directory_user_1", 200, user)).directory_sync()
    assert users.get_directory_user("directory_user_1").email == "marcelina@foo-corp.com"

    make_workos(Route("DELETE", "/directories/directory_1", 202)).directory_sync().delete_directory("directory_1")


def test_directory_not_found_is_request_error(make_workos):
    route = Route("GET", "/directories/missing", 404, {"message": "Not Found"})
    with pytest.raises(RequestError, match=r"GET https://api.workos.test/directories/missing returned 404"):
        make_workos(route).directory_sync().get_directory("missing")


def test_list_organization_roles(make_workos):
    body = {
        "object": "list",
        "data": [
            {
                "object": "role",
                "id": "role_01EHQMYV6MBK39QC5PZXHY59C5",
                "name": "Admin",
                "slug": "admin",
                "description": None,
                "permissions": ["posts:create", "posts:delete"],
                "type": "EnvironmentRole",
                "created_at": "2024-01-01T00:00:00.000Z",
                "updated_at": "2024-01-01T00:00:00.000Z",
            }
        ],
    }
    roles = make_workos(Route("GET", "/organizations/org_1/roles", 200, body)).roles().list_organization_roles("org_1")
    assert [r.slug for r in roles.data] == ["admin"]
    assert roles.data[0].type is RoleType.ENVIRONMENT_ROLE


def test_generate_portal_link(make_workos):
    link = "https://setup.workos.com/portal/launch?secret=JteZqfJZqUcgWGaYCC6iI0gW0"
    route = Route("POST", "/portal/generate_link", 201, {"link": link})
    response = make_workos(route).admin_portal().generate_portal_link(
        GeneratePortalLinkParams(organization_id="org_01EHZNVPK3SFK441A1RGBFSHRT", intent=AdminPortalIntent.SSO)
    )
    assert response.link == link
    assert route.sent_json == {"organization": "org_01EHZNVPK3SFK441A1RGBFSHRT", "intent": "sso"}


def test_portal_link_intent_and_return_url_serialization():
    params = GeneratePortalLinkParams(
        organization_id="org_1", intent=AdminPortalIntent.DIRECTORY_SYNC, return_url="https://app.test/done"
    )
    assert params.to_body() == {"organization": "org_1", "intent": "dsync", "return_url": "https://app.test/done"}


def test_parse_webhook_from_json_and_mapping():
    raw = json.dumps({"id": "wh_01", "event": "dsync.user.created", "data": {"id": "directory_user_1"}})
    webhook = parse_webhook(raw)
    assert (webhook.id, webhook.event, webhook.data["id"]) == ("wh_01", "dsync.user.created", "directory_user_1")
    assert parse_webhook(json.loads(raw)) == webhook


def test_parse_webhook_rejects_other_payloads():
    with pytest.raises(ValueError):
        parse_webhook('{"event": "dsync.user.created"}')
