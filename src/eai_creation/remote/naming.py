"""Naming lookup over HTTP.

Location strings have the form ``corbaname:iiop:<host>:<port>#<name>``.
``HttpNamingContext`` resolves the name against the naming root of
``<host>:<port>`` and returns an ``HttpServiceHome`` for the bound endpoint.
"""

from dataclasses import dataclass

import httpx
import structlog
from pydantic import ValidationError

from ..config import TransportConfig
from ..constants import LOOKUP_PROTOCOL_PREFIX, REMOTE_LOOKUP_NAME
from ..utils.exceptions import NamingError, RemoteInvocationError, ServiceCreateError
from .client import RemoteDataPersistenceClient, error_message
from .endpoints import DPSEndpoints
from .response_models import NamingBinding, SessionResponse

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ServiceLocation:
    """Parsed lookup string."""

    host: str
    port: str
    name: str


def build_lookup_string(host: str, port: str, name: str = REMOTE_LOOKUP_NAME) -> str:
    """Compose ``corbaname:iiop:<host>:<port>#<name>``."""
    return f"{LOOKUP_PROTOCOL_PREFIX}:{host}:{port}#{name}"


def parse_lookup_string(location: str) -> ServiceLocation:
    """
    Split a lookup string into host, port and name.

    IPv6 hosts may be given in brackets (``[::1]``).

    Raises:
        NamingError: If the string is not a valid location
    """
    prefix = f"{LOOKUP_PROTOCOL_PREFIX}:"
    if not location.startswith(prefix):
        raise NamingError(location, reason="Unsupported lookup protocol")

    address, sep, name = location[len(prefix) :].partition("#")
    host, colon, port = address.rpartition(":")
    if not sep or not name or not colon or not host or not port:
        raise NamingError(location, reason="Malformed lookup string")
    return ServiceLocation(host=host, port=port, name=name)


class HttpServiceHome:
    """Service home bound in the naming service; creates service sessions."""

    def __init__(self, endpoint: str, client: httpx.Client, config: TransportConfig):
        self.endpoint = endpoint.rstrip("/")
        self._client = client
        self.config = config

    def create(self) -> RemoteDataPersistenceClient:
        """
        Open a service session.

        Returns:
            Live service handle bound to the new session

        Raises:
            ServiceCreateError: If the home refuses the session
            RemoteInvocationError: On transport failure
        """
        url = f"{self.endpoint}/{DPSEndpoints.SESSIONS}"
        try:
            response = self._client.post(url, json={})
        except httpx.InvalidURL as e:
            raise ServiceCreateError(f"Invalid service endpoint {self.endpoint}: {e}") from e
        except httpx.HTTPError as e:
            raise RemoteInvocationError(f"Service create call failed: {e}") from e

        if response.status_code not in (200, 201):
            raise ServiceCreateError(
                f"Service home refused create ({response.status_code}): {error_message(response)}"
            )
        try:
            session = SessionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ServiceCreateError(f"Invalid create response from service home: {e}") from e

        logger.debug("Service session created", endpoint=self.endpoint)
        return RemoteDataPersistenceClient(self.endpoint, session.session_id, config=self.config)


class HttpNamingContext:
    """
    Naming context backed by an HTTP naming root.

    The underlying HTTP client is created on first use and shared by the
    homes it returns; handles created by those homes use their own client.
    """

    def __init__(self, config: TransportConfig | None = None):
        self.config = config or TransportConfig()
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def naming_url(self, location: ServiceLocation) -> str:
        """URL of the naming binding for ``location``."""
        naming_path = self.config.naming_path.strip("/")
        binding = DPSEndpoints.NAMING_BINDING.format(name=location.name)
        return f"{self.config.scheme}://{location.host}:{location.port}/{naming_path}/{binding}"

    def lookup(self, location: str) -> HttpServiceHome:
        """
        Resolve a lookup string to a service home.

        Raises:
            NamingError: Malformed location, unbound name or bad binding
            RemoteInvocationError: On transport failure
        """
        parsed = parse_lookup_string(location)
        url = self.naming_url(parsed)

        try:
            response = self.client.get(url)
        except httpx.InvalidURL as e:
            raise NamingError(location, reason=f"Invalid naming address ({e})") from e
        except httpx.HTTPError as e:
            raise RemoteInvocationError(f"Naming lookup of {location} failed: {e}") from e

        if response.status_code == 404:
            raise NamingError(location)
        if response.is_error:
            raise NamingError(
                location,
                reason=f"Naming service error {response.status_code}: {error_message(response)}",
            )
        try:
            binding = NamingBinding.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise NamingError(location, reason=f"Invalid naming binding ({e})") from e

        return HttpServiceHome(binding.endpoint, self.client, self.config)
