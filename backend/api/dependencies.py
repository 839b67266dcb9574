"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations over the Supabase
repositories.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.access.interfaces import IAccessGate
    from modules.auth.interfaces import ILoginService
    from modules.devices.interfaces import IDeviceRegistry
    from modules.sharing.interfaces import IProfileRoleResolver
    from modules.subscriptions.interfaces import ISubscriptionService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._subscription_service: "ISubscriptionService | None" = None
        self._device_registry: "IDeviceRegistry | None" = None
        self._role_resolver: "IProfileRoleResolver | None" = None
        self._access_gate: "IAccessGate | None" = None
        self._login_service: "ILoginService | None" = None

    @property
    def subscriptions(self) -> "ISubscriptionService":
        """Get the subscription service instance."""
        if self._subscription_service is None:
            from modules.subscriptions.repository import get_subscription_repository
            from modules.subscriptions.service import SubscriptionService
            self._subscription_service = SubscriptionService(get_subscription_repository())
        return self._subscription_service

    @property
    def devices(self) -> "IDeviceRegistry":
        """Get the device registry instance."""
        if self._device_registry is None:
            from shared.config import get_settings
            from modules.devices.repository import get_device_repository
            from modules.devices.service import DeviceRegistryEnforcer
            self._device_registry = DeviceRegistryEnforcer(
                get_device_repository(),
                allow_takeover=get_settings().allow_device_takeover,
            )
        return self._device_registry

    @property
    def roles(self) -> "IProfileRoleResolver":
        """Get the profile role resolver instance."""
        if self._role_resolver is None:
            from modules.sharing.repository import get_profile_repository, get_share_repository
            from modules.sharing.service import ProfileRoleResolver
            self._role_resolver = ProfileRoleResolver(
                get_profile_repository(),
                get_share_repository(),
            )
        return self._role_resolver

    @property
    def access_gate(self) -> "IAccessGate":
        """Get the access gate instance."""
        if self._access_gate is None:
            from modules.access.service import AccessGate
            self._access_gate = AccessGate(self.subscriptions, self.devices, self.roles)
        return self._access_gate

    @property
    def login(self) -> "ILoginService":
        """Get the login service instance."""
        if self._login_service is None:
            from modules.auth.service import LoginService
            self._login_service = LoginService(self.devices, self.subscriptions)
        return self._login_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._subscription_service = None
        self._device_registry = None
        self._role_resolver = None
        self._access_gate = None
        self._login_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_subscription_service() -> "ISubscriptionService":
    """FastAPI dependency for subscription service."""
    return get_container().subscriptions


def get_device_registry() -> "IDeviceRegistry":
    """FastAPI dependency for device registry."""
    return get_container().devices


def get_profile_role_resolver() -> "IProfileRoleResolver":
    """FastAPI dependency for profile role resolver."""
    return get_container().roles


def get_access_gate() -> "IAccessGate":
    """FastAPI dependency for access gate."""
    return get_container().access_gate


def get_login_service() -> "ILoginService":
    """FastAPI dependency for login service."""
    return get_container().login
