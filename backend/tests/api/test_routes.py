"""
Tests for the gated API routes.

Services run over in-memory stores; token verification uses the test secret.
"""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import (
    get_access_gate,
    get_device_registry,
    get_login_service,
    get_profile_role_resolver,
    get_subscription_service,
)
from modules.access.service import AccessGate
from modules.auth.service import LoginService
from modules.devices.service import DeviceRegistryEnforcer
from modules.sharing.models import Role, ShareGrant, ShareStatus
from modules.sharing.service import ProfileRoleResolver
from modules.subscriptions.models import SubscriptionStatus
from modules.subscriptions.service import SubscriptionService
from shared.config import Settings
from fakes import (
    InMemoryDeviceStore,
    InMemoryProfileStore,
    InMemoryShareStore,
    InMemorySubscriptionStore,
)
from helpers import TEST_HOOK_SECRET, create_test_token


client = TestClient(app)

USER_ID = "test-user-123"


@pytest.fixture
def stores():
    return SimpleNamespace(
        devices=InMemoryDeviceStore(),
        subscriptions=InMemorySubscriptionStore(),
        profiles=InMemoryProfileStore({"profile-own": USER_ID, "profile-shared": "user-2"}),
        shares=InMemoryShareStore(
            [
                ShareGrant(
                    share_id="share-1",
                    profile_id="profile-shared",
                    owner_id="user-2",
                    invitee_email="test@example.com",
                    role=Role.EDITOR,
                    status=ShareStatus.ACCEPTED,
                )
            ]
        ),
    )


@pytest.fixture(autouse=True)
def services(stores, jwt_secret):
    subscriptions = SubscriptionService(stores.subscriptions)
    devices = DeviceRegistryEnforcer(stores.devices)
    roles = ProfileRoleResolver(stores.profiles, stores.shares)
    gate = AccessGate(subscriptions, devices, roles, settings=Settings(_env_file=None))
    login = LoginService(devices, subscriptions, device_limit=1)

    app.dependency_overrides[get_subscription_service] = lambda: subscriptions
    app.dependency_overrides[get_device_registry] = lambda: devices
    app.dependency_overrides[get_profile_role_resolver] = lambda: roles
    app.dependency_overrides[get_access_gate] = lambda: gate
    app.dependency_overrides[get_login_service] = lambda: login
    yield
    app.dependency_overrides.clear()


def headers(device_id="dev-a", **extra):
    result = {"Authorization": f"Bearer {create_test_token()}", **extra}
    if device_id:
        result["X-Device-Id"] = device_id
    return result


class TestCompleteLogin:

    def test_registers_device_without_device_header(self, stores):
        response = client.post(
            "/api/auth/complete-login",
            json={"deviceId": "dev-a", "meta": {"osName": "iOS"}},
            headers=headers(device_id=None),
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True, "device_id": "dev-a", "evicted": []}
        assert stores.devices.rows["dev-a"]["os_name"] == "iOS"

    def test_device_limit_exceeded(self, stores):
        stores.devices.add("dev-a", USER_ID)

        response = client.post(
            "/api/auth/complete-login",
            json={"deviceId": "dev-b"},
            headers=headers(device_id="dev-b"),
        )

        assert response.status_code == 403
        body = response.json()
        assert body["code"] == "DEVICE_LIMIT_EXCEEDED"
        assert body["details"]["limit"] == 1

    def test_kick_previous(self, stores):
        stores.devices.add("dev-a", USER_ID)

        response = client.post(
            "/api/auth/complete-login",
            json={"deviceId": "dev-b", "kickPrevious": True},
            headers=headers(device_id="dev-b"),
        )

        assert response.status_code == 200
        assert response.json()["evicted"] == ["dev-a"]
        assert set(stores.devices.rows) == {"dev-b"}

    def test_device_owned_by_another_account(self, stores):
        stores.devices.add("dev-a", "user-2")

        response = client.post(
            "/api/auth/complete-login",
            json={"deviceId": "dev-a"},
            headers=headers(device_id=None),
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DEVICE_REGISTERED_TO_ANOTHER_ACCOUNT"

    def test_allowlist_holds_when_mounted_under_root_path(self, stores):
        mounted = TestClient(app, root_path="/backend")

        response = mounted.post(
            "/api/auth/complete-login",
            json={"deviceId": "dev-a"},
            headers=headers(device_id=None),
        )

        assert response.status_code == 200
        assert "dev-a" in stores.devices.rows

    def test_allowlist_does_not_cover_other_routes_under_root_path(self):
        mounted = TestClient(app, root_path="/backend")

        response = mounted.get("/api/users/me", headers=headers(device_id=None))

        assert response.status_code == 400
        assert response.json()["code"] == "DEVICE_REQUIRED"

    def test_missing_device_id_is_rejected(self):
        response = client.post(
            "/api/auth/complete-login",
            json={},
            headers=headers(device_id=None),
        )
        assert response.status_code == 422


class TestPreAuthenticationHook:

    def _post(self, request):
        return client.post(
            "/api/hooks/pre-authentication",
            json={
                "triggerSource": "PreAuthentication_Authentication",
                "userName": USER_ID,
                "request": request,
            },
            headers={"Authorization": f"Bearer {TEST_HOOK_SECRET}"},
        )

    def test_returns_event_unchanged(self, stores):
        request = {
            "clientMetadata": {"deviceId": "dev-a"},
            "userAttributes": {"email": "test@example.com", "email_verified": "true"},
            "validationData": {"source": "web"},
        }

        response = self._post(request)

        assert response.status_code == 200
        assert response.json() == {
            "triggerSource": "PreAuthentication_Authentication",
            "userName": USER_ID,
            "request": request,
        }
        assert "dev-a" in stores.devices.rows

    @pytest.mark.parametrize("request_body", [{"clientMetadata": None}, {}])
    def test_missing_client_metadata_allows_sign_in(self, stores, request_body):
        response = self._post(request_body)

        assert response.status_code == 200
        assert response.json()["request"] == request_body
        assert stores.devices.rows == {}

    def test_over_limit_aborts_sign_in(self, stores):
        stores.devices.add("dev-a", USER_ID)

        response = self._post({"clientMetadata": {"deviceId": "dev-b"}})

        assert response.status_code == 403
        assert response.json()["code"] == "DEVICE_LIMIT_EXCEEDED"


class TestGatedRoutes:

    def test_user_overview(self, stores):
        stores.devices.add("dev-a", USER_ID)

        response = client.get("/api/users/me", headers=headers())

        assert response.status_code == 200
        assert response.json() == {
            "id": USER_ID,
            "email": "test@example.com",
            "subscription_active": False,
            "device_id": "dev-a",
            "device_limit_reached": False,
        }

    def test_missing_device_header(self):
        response = client.get("/api/users/me", headers=headers(device_id=None))

        assert response.status_code == 400
        assert response.json()["code"] == "DEVICE_REQUIRED"

    def test_unregistered_device_is_not_created(self, stores):
        response = client.get("/api/users/me", headers=headers(device_id="guessed"))

        assert response.status_code == 403
        assert response.json()["code"] == "DEVICE_NOT_REGISTERED"
        assert stores.devices.rows == {}

    def test_unregistered_device_at_limit(self, stores):
        stores.devices.add("dev-a", USER_ID)

        response = client.get("/api/users/me", headers=headers(device_id="dev-b"))

        assert response.status_code == 403
        assert response.json()["code"] == "DEVICE_LIMIT_EXCEEDED"

    def test_store_failure_is_503(self, stores):
        stores.devices.add("dev-a", USER_ID)
        stores.devices.fail = True

        response = client.get("/api/users/me", headers=headers())

        assert response.status_code == 503
        assert response.json()["code"] == "STORE_UNAVAILABLE"

    def test_current_subscription(self, stores):
        stores.devices.add("dev-a", USER_ID)
        stores.subscriptions.add(USER_ID, SubscriptionStatus.ACTIVE, "2024-01-01T00:00:00Z")

        response = client.get("/api/subscriptions/current", headers=headers())

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_no_current_subscription(self, stores):
        stores.devices.add("dev-a", USER_ID)

        response = client.get("/api/subscriptions/current", headers=headers())

        assert response.status_code == 404
        assert response.json()["code"] == "SUBSCRIPTION_NOT_FOUND"


class TestProfileRoutes:

    @pytest.fixture(autouse=True)
    def registered_device(self, stores):
        stores.devices.add("dev-a", USER_ID)

    def test_owner_role(self):
        response = client.get("/api/profiles/profile-own/role", headers=headers())

        assert response.status_code == 200
        assert response.json() == {"profile_id": "profile-own", "role": "Owner"}

    def test_shared_role(self):
        response = client.get("/api/profiles/profile-shared/role", headers=headers())

        assert response.status_code == 200
        assert response.json()["role"] == "Editor"

    def test_no_access(self):
        response = client.get("/api/profiles/profile-other/role", headers=headers())

        assert response.status_code == 403
        body = response.json()
        assert body["code"] == "FORBIDDEN"
        assert body["details"] == {"profile_id": "profile-other", "required_role": "Viewer"}


class TestDeviceRoutes:

    @pytest.fixture(autouse=True)
    def registered_device(self, stores):
        stores.devices.add("dev-a", USER_ID, last_seen="2024-01-01T00:00:00+00:00")

    def test_list_devices(self, stores):
        stores.devices.add("dev-old", USER_ID, last_seen="2023-01-01T00:00:00+00:00")
        stores.devices.add("dev-x", "user-2")

        response = client.get("/api/devices", headers=headers())

        assert response.status_code == 200
        assert [d["device_id"] for d in response.json()] == ["dev-a", "dev-old"]

    def test_update_current_device(self, stores):
        response = client.put(
            "/api/devices/current",
            json={"deviceId": "dev-a", "deviceName": "Work laptop", "timeZone": "UTC"},
            headers=headers(),
        )

        assert response.status_code == 200
        assert response.json()["device_name"] == "Work laptop"
        assert stores.devices.rows["dev-a"]["time_zone"] == "UTC"

    def test_update_requires_matching_header(self):
        response = client.put(
            "/api/devices/current",
            json={"deviceId": "dev-b", "deviceName": "Other"},
            headers=headers(),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DEVICE_ID_MISMATCH"

    def test_device_info_header_is_recorded(self, stores):
        response = client.get(
            "/api/devices",
            headers=headers(**{"X-Device-Info": json.dumps({"browserName": "Safari"})}),
        )

        assert response.status_code == 200
        assert stores.devices.rows["dev-a"]["browser_name"] == "Safari"

    def test_revoke_other_device(self, stores):
        stores.devices.add("dev-b", USER_ID)

        response = client.delete("/api/devices/dev-b", headers=headers())

        assert response.status_code == 204
        assert "dev-b" not in stores.devices.rows

    def test_revoke_someone_elses_device(self, stores):
        stores.devices.add("dev-x", "user-2")

        response = client.delete("/api/devices/dev-x", headers=headers())

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_DEVICE_OWNER"
        assert "dev-x" in stores.devices.rows

    def test_revoked_device_is_locked_out(self, stores):
        client.delete("/api/devices/dev-a", headers=headers())

        response = client.get("/api/devices", headers=headers())

        assert response.status_code == 403
        assert response.json()["code"] == "DEVICE_NOT_REGISTERED"
