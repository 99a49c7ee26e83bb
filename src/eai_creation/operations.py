"""Remote operations performed for each event.

1. create_entity_address_info: creates the EntityAddressInfo PO
2. set_entity_address_info: sets the new PO on the target MO

Both take the service handle explicitly; neither keeps state.
"""

import structlog

from .models import Bucket, EntityAddressInfo
from .remote.service import RemotePersistenceService
from .utils.exceptions import (
    AssociationError,
    DataPersistenceServiceRemoteError,
    ManagedObjectNotFoundError,
    RecordCreationError,
    RemoteInvocationError,
)

logger = structlog.get_logger(__name__)


def create_entity_address_info(
    service: RemotePersistenceService,
    eai: EntityAddressInfo,
    bucket: Bucket = Bucket.LIVE,
) -> int:
    """
    Create the EntityAddressInfo PO.

    Args:
        service: Live service handle
        eai: Record to create
        bucket: Target bucket

    Returns:
        Id of the created PO

    Raises:
        RecordCreationError: If create_po fails
    """
    logger.debug("Creating EntityAddressInfo PO", namespace=eai.namespace, type=eai.type_name)
    try:
        eai_id = service.create_po(
            bucket, eai.namespace, eai.type_name, eai.version, eai.attributes()
        )
    except (RemoteInvocationError, DataPersistenceServiceRemoteError) as e:
        logger.error(
            "Unable to create EntityAddressInfo PO",
            namespace=eai.namespace,
            type=eai.type_name,
            version=eai.version,
            error=str(e),
        )
        raise RecordCreationError(eai.namespace, eai.type_name, eai.version, cause=e) from e

    logger.debug("Successfully created EAI", eai_id=eai_id)
    return eai_id


def set_entity_address_info(
    service: RemotePersistenceService,
    fdn: str,
    eai_id: int,
    bucket: Bucket = Bucket.LIVE,
) -> int:
    """
    Set the EntityAddressInfo on the MO at ``fdn``.

    Args:
        service: Live service handle
        fdn: FDN of the target MO
        eai_id: Id returned by create_entity_address_info
        bucket: Target bucket

    Returns:
        Id of the target MO

    Raises:
        ManagedObjectNotFoundError: If no MO exists at ``fdn``
        AssociationError: If get_mo or set_entity_address_info fails
    """
    logger.debug("Reading MO", fdn=fdn)
    try:
        mo = service.get_mo(bucket, fdn)
        if mo is None:
            logger.error("No MO exists with FDN", fdn=fdn)
            raise ManagedObjectNotFoundError(fdn)

        service.set_entity_address_info(bucket, mo.po_id, eai_id)
    except (RemoteInvocationError, DataPersistenceServiceRemoteError) as e:
        logger.error("Failed to set EAI on MO", fdn=fdn, error=str(e))
        raise AssociationError(fdn, cause=e) from e

    logger.debug("Successfully set EAI on MO", fdn=fdn, mo_id=mo.po_id, eai_id=eai_id)
    return mo.po_id
