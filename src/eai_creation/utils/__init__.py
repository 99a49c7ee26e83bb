"""Utility functions and exceptions."""

from .exceptions import (
    AssociationError,
    ConfigurationError,
    DataPersistenceServiceRemoteError,
    EventHandlerError,
    EventHandlerErrorKind,
    ManagedObjectNotFoundError,
    NamingError,
    NarrowingError,
    RecordCreationError,
    RemoteError,
    RemoteInvocationError,
    ServiceCreateError,
    ServiceLookupError,
)

__all__ = [
    "EventHandlerError",
    "EventHandlerErrorKind",
    "ConfigurationError",
    "ServiceLookupError",
    "RecordCreationError",
    "ManagedObjectNotFoundError",
    "AssociationError",
    "RemoteError",
    "NamingError",
    "NarrowingError",
    "ServiceCreateError",
    "RemoteInvocationError",
    "DataPersistenceServiceRemoteError",
]
