"""Locates the remote data persistence service.

Lookup is done on every call. The returned handle belongs to the caller
for the duration of one event and is never pooled.
"""

import structlog

from ..constants import REMOTE_LOOKUP_NAME
from ..utils.exceptions import (
    NamingError,
    NarrowingError,
    RemoteInvocationError,
    ServiceCreateError,
    ServiceLookupError,
)
from .naming import build_lookup_string
from .service import NamingContext, PersistenceServiceHome, RemotePersistenceService, narrow

logger = structlog.get_logger(__name__)


class RemoteServiceLocator:
    """Resolves host and port into a live RemotePersistenceService."""

    def __init__(self, naming_context: NamingContext, lookup_name: str = REMOTE_LOOKUP_NAME):
        self.naming_context = naming_context
        self.lookup_name = lookup_name

    def locate(self, host: str, port: str) -> RemotePersistenceService:
        """
        Look up the service home and create a service handle.

        Args:
            host: Remote host
            port: Remote port

        Returns:
            Live service handle

        Raises:
            ServiceLookupError: If lookup, narrowing or create fails
        """
        lookup_string = build_lookup_string(host, port, self.lookup_name)
        logger.debug("Performing remote lookup", lookup_string=lookup_string)
        try:
            resolved = self.naming_context.lookup(lookup_string)
            home = narrow(resolved, PersistenceServiceHome)
            service = home.create()
        except (NamingError, NarrowingError, ServiceCreateError, RemoteInvocationError) as e:
            logger.error(
                "Error doing lookup of Remote Data Persistence service",
                lookup_string=lookup_string,
                error=str(e),
            )
            raise ServiceLookupError(lookup_string, cause=e) from e

        logger.debug("Remote DPS lookup successful", lookup_string=lookup_string)
        return service
