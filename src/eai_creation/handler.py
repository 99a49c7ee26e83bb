"""EntityAddressInfo creation event handler.

This handler runs inside the synchronous add-node flow of the mediation
engine, while the persistence transaction is still open. Any exception
raised here rolls that transaction back and fails the flow.

For each event the handler:

1. Looks up the remote data persistence service
2. Creates a new EntityAddressInfo PO
3. Sets that PO as the EntityAddressInfo of the target MO
"""

from enum import Enum
from typing import Any, Protocol

import structlog

from .config import Configuration, HandlerConfig, TransportConfig, extract_parameters
from .models import Bucket, EntityAddressInfo
from .observability.logger import LogContext
from .operations import create_entity_address_info, set_entity_address_info
from .remote.locator import RemoteServiceLocator
from .remote.naming import HttpNamingContext
from .remote.service import NamingContext, RemotePersistenceService
from .utils.exceptions import ConfigurationError, RemoteError

logger = structlog.get_logger(__name__)


def _close_service(service: RemotePersistenceService) -> None:
    """Close a service handle, logging a remote failure instead of raising it."""
    try:
        service.close()
    except RemoteError as e:
        logger.warning("Failed to close service handle", error=str(e))


class HandlerState(str, Enum):
    """Progress of the handler through initialization and the current event."""

    UNINITIALIZED = "uninitialized"
    CONFIGURED = "configured"
    LOCATING_SERVICE = "locating_service"
    CREATING = "creating"
    ASSOCIATING = "associating"
    DONE = "done"
    FAILED = "failed"


class EventHandlerContext(Protocol):
    """Context the mediation engine passes to init()."""

    def get_event_handler_configuration(self) -> Configuration:
        """Return the handler's configuration."""
        ...


class EaiCreationHandler:
    """
    Creates an EntityAddressInfo PO and sets it on the MO for every event.

    The configuration is immutable after init(). The service handle is looked
    up per event and passed explicitly through the steps, so it is never
    shared between events.
    """

    def __init__(
        self,
        naming_context: NamingContext | None = None,
        transport_config: TransportConfig | None = None,
        bucket: Bucket = Bucket.LIVE,
    ):
        """
        Initialize the handler.

        Args:
            naming_context: Naming context to look the service up in; an
                HttpNamingContext is created on first use if omitted
            transport_config: Settings for the default HttpNamingContext
            bucket: Bucket all remote calls address
        """
        self._naming_context = naming_context
        self._owns_naming_context = naming_context is None
        self.transport_config = transport_config or TransportConfig()
        self.bucket = bucket
        self.config: HandlerConfig | None = None
        self.state = HandlerState.UNINITIALIZED

    @property
    def naming_context(self) -> NamingContext:
        """Naming context, created on first use."""
        if self._naming_context is None:
            self._naming_context = HttpNamingContext(self.transport_config)
            self._owns_naming_context = True
        return self._naming_context

    def init(self, ctx: EventHandlerContext) -> None:
        """
        Extract and validate the handler configuration.

        Raises:
            ConfigurationError: If a required property is missing or empty
        """
        try:
            self.config = extract_parameters(ctx.get_event_handler_configuration())
        except ConfigurationError as e:
            self.config = None
            self.state = HandlerState.FAILED
            logger.error("Invalid handler configuration", error=str(e))
            raise
        self.state = HandlerState.CONFIGURED

    def on_event(self, input_event: Any = None) -> None:
        """
        Create an EntityAddressInfo PO and set it on the MO.

        Raises:
            EventHandlerError: If any step fails; later steps are not run
        """
        config = self.config
        if config is None:
            raise ConfigurationError(
                "configuration", message="Handler has not been initialized with a configuration"
            )

        handler_name = type(self).__name__
        with LogContext(handler=handler_name, fdn=config.target_fdn):
            logger.debug("onEvent called")
            try:
                self.state = HandlerState.LOCATING_SERVICE
                locator = RemoteServiceLocator(self.naming_context)
                service = locator.locate(config.remote_host, config.remote_port)
                try:
                    self.state = HandlerState.CREATING
                    eai = EntityAddressInfo(config.ne_type, config.platform_type)
                    eai_id = create_entity_address_info(service, eai, self.bucket)

                    self.state = HandlerState.ASSOCIATING
                    set_entity_address_info(service, config.target_fdn, eai_id, self.bucket)
                finally:
                    _close_service(service)
            except Exception:
                self.state = HandlerState.FAILED
                raise

            self.state = HandlerState.DONE
            logger.debug("onEvent finished")

    def destroy(self) -> None:
        """Release the naming context if the handler created it."""
        if self._naming_context is not None and self._owns_naming_context:
            self._naming_context.close()
            self._naming_context = None
