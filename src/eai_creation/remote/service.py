"""Interfaces of the remote collaborators.

The handler only depends on these protocols. The HTTP implementations in
``naming`` and ``client`` are one binding of them; the mediation engine may
inject any other.
"""

from typing import Any, Protocol, TypeVar

from ..models import Bucket
from ..utils.exceptions import NarrowingError
from .response_models import ManagedObjectDto

T = TypeVar("T")


class RemotePersistenceService(Protocol):
    """Remote data persistence service operations used by the handler."""

    def create_po(
        self,
        bucket: Bucket,
        namespace: str,
        type_name: str,
        version: str,
        attributes: dict[str, Any],
    ) -> int:
        """Create a persistent object and return its id.

        Raises:
            RemoteInvocationError: Transport failure
            DataPersistenceServiceRemoteError: Service rejected the call
        """
        ...

    def get_mo(self, bucket: Bucket, fdn: str) -> ManagedObjectDto | None:
        """Read a managed object by FDN. Returns None if it does not exist."""
        ...

    def set_entity_address_info(self, bucket: Bucket, po_id: int, eai_id: int) -> None:
        """Set the EntityAddressInfo of the MO with id ``po_id``."""
        ...

    def close(self) -> None:
        """Release the service handle."""
        ...


class PersistenceServiceHome(Protocol):
    """Factory for RemotePersistenceService handles."""

    def create(self) -> RemotePersistenceService:
        """Create a live service handle.

        Raises:
            ServiceCreateError: Home refused to create a handle
            RemoteInvocationError: Transport failure
        """
        ...


class NamingContext(Protocol):
    """Directory used to resolve a location string into a remote object."""

    def lookup(self, location: str) -> Any:
        """Resolve ``location``.

        Raises:
            NamingError: Name not bound
            RemoteInvocationError: Transport failure
        """
        ...

    def close(self) -> None:
        """Release resources held by the context."""
        ...


def _interface_methods(interface: type) -> list[str]:
    return [
        name
        for name, value in vars(interface).items()
        if not name.startswith("_") and callable(value)
    ]


def narrow(obj: Any, interface: type[T]) -> T:
    """
    Check that a looked-up object provides every method of ``interface``.

    Args:
        obj: Object returned by NamingContext.lookup
        interface: Protocol to narrow to

    Returns:
        ``obj`` unchanged

    Raises:
        NarrowingError: If any method is missing
    """
    if obj is None:
        raise NarrowingError(obj, interface)
    missing = [
        name
        for name in _interface_methods(interface)
        if not callable(getattr(obj, name, None))
    ]
    if missing:
        raise NarrowingError(obj, interface)
    return obj
