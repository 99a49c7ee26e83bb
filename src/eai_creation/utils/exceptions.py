"""Custom exceptions for the EntityAddressInfo creation handler.

Exception Hierarchy:
-------------------
EventHandlerError (base, raised to the mediation engine)
├── ConfigurationError           # Required property missing or empty
├── ServiceLookupError           # Naming lookup, narrowing or home create() failed
├── RecordCreationError          # create_po failed
├── ManagedObjectNotFoundError   # No MO exists at the configured FDN
└── AssociationError             # get_mo or set_entity_address_info failed

RemoteError (base, raised by remote collaborators)
├── NamingError                  # Name not bound / naming service refused
├── NarrowingError               # Resolved object is not a service home
├── ServiceCreateError           # Home factory create() failed
└── RemoteInvocationError        # Transport failure on a remote call
    └── DataPersistenceServiceRemoteError  # Service rejected the call

Usage Guidelines:
----------------
1. Remote collaborators raise RemoteError subclasses only.

2. Handler steps catch the RemoteError subclasses they expect and re-raise
   the matching EventHandlerError with the original as cause.

3. EventHandlerError always aborts the enclosing transaction. Nothing in
   this package retries; rollback and retry belong to the mediation engine.
"""

from enum import Enum


class EventHandlerErrorKind(str, Enum):
    """Failure classes reported to the mediation engine."""

    CONFIGURATION = "configuration"
    LOOKUP = "lookup"
    CREATION = "creation"
    NOT_FOUND = "not_found"
    ASSOCIATION = "association"


class EventHandlerError(Exception):
    """Base exception for all handler-level errors."""

    kind: EventHandlerErrorKind | None = None

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """
        Initialize EventHandlerError.

        Args:
            message: Human readable error message.
            cause: Optional underlying exception.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(EventHandlerError):
    """Raised when a required configuration property is missing or empty."""

    kind = EventHandlerErrorKind.CONFIGURATION

    def __init__(self, property_name: str, message: str | None = None) -> None:
        """
        Initialize ConfigurationError.

        Args:
            property_name: Name of the offending property.
            message: Optional message overriding the default.
        """
        super().__init__(message or f"This Config attribute was Null or Empty: {property_name}")
        self.property_name = property_name


class ServiceLookupError(EventHandlerError):
    """Raised when the remote persistence service cannot be located."""

    kind = EventHandlerErrorKind.LOOKUP

    def __init__(self, lookup_string: str, cause: Exception | None = None) -> None:
        """
        Initialize ServiceLookupError.

        Args:
            lookup_string: Location that was looked up.
            cause: Underlying naming, narrowing or create failure.
        """
        super().__init__(
            "Error doing lookup of Remote Data Persistence service", cause=cause
        )
        self.lookup_string = lookup_string


class RecordCreationError(EventHandlerError):
    """Raised when the EntityAddressInfo record cannot be created."""

    kind = EventHandlerErrorKind.CREATION

    def __init__(
        self, namespace: str, type_name: str, version: str, cause: Exception | None = None
    ) -> None:
        """
        Initialize RecordCreationError.

        Args:
            namespace: Namespace of the record.
            type_name: Type of the record.
            version: Schema version of the record.
            cause: Underlying remote failure.
        """
        super().__init__(
            f"Unable to create EntityAddressInfo PO: {namespace}:{type_name}:{version}",
            cause=cause,
        )
        self.namespace = namespace
        self.type_name = type_name
        self.version = version


class ManagedObjectNotFoundError(EventHandlerError):
    """Raised when no managed object exists at the configured FDN."""

    kind = EventHandlerErrorKind.NOT_FOUND

    def __init__(self, fdn: str) -> None:
        """
        Initialize ManagedObjectNotFoundError.

        Args:
            fdn: FDN that was read.
        """
        super().__init__(f"No MO exists with FDN: {fdn}")
        self.fdn = fdn


class AssociationError(EventHandlerError):
    """Raised when the EntityAddressInfo cannot be set on the managed object."""

    kind = EventHandlerErrorKind.ASSOCIATION

    def __init__(self, fdn: str, cause: Exception | None = None) -> None:
        """
        Initialize AssociationError.

        Args:
            fdn: FDN of the target managed object.
            cause: Underlying remote failure.
        """
        super().__init__(f"Failed to set EAI on MO: {fdn}", cause=cause)
        self.fdn = fdn


class RemoteError(Exception):
    """Base exception for failures reported by remote collaborators."""

    pass


class NamingError(RemoteError):
    """Raised when a name cannot be resolved by the naming service."""

    def __init__(self, name: str, reason: str = "Name not found") -> None:
        """
        Initialize NamingError.

        Args:
            name: Name or location that was looked up.
            reason: Why resolution failed.
        """
        super().__init__(f"{reason}: {name}")
        self.name = name


class NarrowingError(RemoteError):
    """Raised when a resolved object does not provide the expected interface."""

    def __init__(self, obj: object, expected: type) -> None:
        """
        Initialize NarrowingError.

        Args:
            obj: Object returned by the lookup.
            expected: Interface it was narrowed to.
        """
        super().__init__(
            f"Cannot narrow {type(obj).__name__} to {getattr(expected, '__name__', expected)}"
        )
        self.expected = expected


class ServiceCreateError(RemoteError):
    """Raised when a service home fails to create a service instance."""

    pass


class RemoteInvocationError(RemoteError):
    """Raised when a remote call fails in transport."""

    pass


class DataPersistenceServiceRemoteError(RemoteInvocationError):
    """Raised when the persistence service rejects a call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize DataPersistenceServiceRemoteError.

        Args:
            message: Error message.
            status_code: Optional HTTP status code returned by the service.
        """
        super().__init__(message)
        self.status_code = status_code
