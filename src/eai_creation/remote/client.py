"""HTTP client for the remote data persistence service.

A client instance is the live service handle returned by
``HttpServiceHome.create()``. It is bound to one service session and is
used for a single event, then closed.

Error Mapping:
-------------
- httpx transport errors      -> RemoteInvocationError
- Unusable URL (InvalidURL)   -> RemoteInvocationError
- HTTP error status           -> DataPersistenceServiceRemoteError(status_code)
- 404 on GET mos              -> None (MO does not exist)
- Unparseable success body    -> DataPersistenceServiceRemoteError

No retries are made at this layer.
"""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from ..config import TransportConfig
from ..models import Bucket
from ..utils.exceptions import DataPersistenceServiceRemoteError, RemoteInvocationError
from .endpoints import DPSEndpoints
from .response_models import CreatePoResponse, ErrorResponse, ManagedObjectDto

logger = structlog.get_logger(__name__)

SESSION_HEADER = "X-Session-Id"


def error_message(response: httpx.Response) -> str:
    """
    Extract a readable error message from an error response.

    Falls back to the raw body when it is not a JSON error object.
    """
    message = response.text
    if response.headers.get("content-type", "").startswith("application/json"):
        try:
            data = response.json()
        except ValueError:
            return message
        if isinstance(data, dict):
            try:
                message = ErrorResponse.model_validate(data).get_full_message()
            except ValidationError:
                pass
    return message


class RemoteDataPersistenceClient:
    """
    Remote data persistence service handle.

    Features:
    - create_po / get_mo / set_entity_address_info over JSON
    - Response validation with pydantic models
    - Uniform mapping of failures onto RemoteError subclasses
    """

    def __init__(
        self,
        endpoint: str,
        session_id: str,
        config: TransportConfig | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: Service base URL as bound in the naming service
            session_id: Session created by the service home
            config: Transport settings
            http_client: Optional pre-built client; owned by the caller if given
        """
        self.config = config or TransportConfig()
        self.endpoint = endpoint.rstrip("/")
        self.session_id = session_id
        self._client = http_client
        self._owns_client = http_client is None

    def __enter__(self) -> "RemoteDataPersistenceClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this handle created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
        self._client = None

    @property
    def client(self) -> httpx.Client:
        """HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
            )
            self._owns_client = True
        return self._client

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """
        Make a request to the persistence service.

        Args:
            method: HTTP method
            endpoint: Path relative to the service endpoint
            params: Query parameters
            json: JSON body
            allow_not_found: Return None on 404 instead of raising

        Returns:
            Parsed JSON body, or None for 204 and allowed 404

        Raises:
            RemoteInvocationError: On transport failure
            DataPersistenceServiceRemoteError: On an error status
        """
        url = f"{self.endpoint}/{endpoint.lstrip('/')}"
        headers = {SESSION_HEADER: self.session_id, "Content-Type": "application/json"}

        try:
            response = self.client.request(method, url, params=params, json=json, headers=headers)
        except httpx.InvalidURL as e:
            raise RemoteInvocationError(f"Invalid URL for {method} {endpoint}: {e}") from e
        except httpx.HTTPError as e:
            raise RemoteInvocationError(f"Remote call {method} {endpoint} failed: {e}") from e

        if response.status_code == 404 and allow_not_found:
            return None
        if response.is_error:
            raise DataPersistenceServiceRemoteError(
                f"DPS error {response.status_code}: {error_message(response)}",
                status_code=response.status_code,
            )
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DataPersistenceServiceRemoteError(
                f"Invalid JSON from {method} {endpoint}: {e}", status_code=response.status_code
            ) from e

    def create_po(
        self,
        bucket: Bucket,
        namespace: str,
        type_name: str,
        version: str,
        attributes: dict[str, Any],
    ) -> int:
        """
        Create a persistent object.

        Args:
            bucket: Target bucket
            namespace: PO namespace
            type_name: PO type
            version: PO schema version
            attributes: PO attributes

        Returns:
            Id of the created PO
        """
        payload = {
            "bucket": bucket.wire_value,
            "namespace": namespace,
            "type": type_name,
            "version": version,
            "attributes": attributes,
        }
        data = self.request("POST", DPSEndpoints.POS, json=payload)
        try:
            return CreatePoResponse.model_validate(data).po_id
        except ValidationError as e:
            raise DataPersistenceServiceRemoteError(f"Invalid create_po response: {e}") from e

    def get_mo(self, bucket: Bucket, fdn: str) -> ManagedObjectDto | None:
        """
        Read a managed object by FDN.

        Returns:
            The managed object, or None if no MO exists at ``fdn``
        """
        params: dict[str, Any] = {"fdn": fdn}
        if bucket.wire_value is not None:
            params["bucket"] = bucket.wire_value
        data = self.request("GET", DPSEndpoints.MOS, params=params, allow_not_found=True)
        if not data:
            return None
        try:
            return ManagedObjectDto.model_validate(data)
        except ValidationError as e:
            raise DataPersistenceServiceRemoteError(f"Invalid get_mo response: {e}") from e

    def set_entity_address_info(self, bucket: Bucket, po_id: int, eai_id: int) -> None:
        """Set the EntityAddressInfo of the MO with id ``po_id`` to ``eai_id``."""
        self.request(
            "PUT",
            DPSEndpoints.MO_ENTITY_ADDRESS_INFO.format(po_id=po_id),
            json={"bucket": bucket.wire_value, "eaiId": eai_id},
        )
