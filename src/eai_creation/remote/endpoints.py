"""Centralized endpoint paths for the naming and persistence services.

Usage:
    from eai_creation.remote.endpoints import DPSEndpoints

    endpoint = DPSEndpoints.MO_ENTITY_ADDRESS_INFO.format(po_id=2222)
    # Returns: "mos/2222/entityAddressInfo"
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DPSEndpoints:
    """
    Persistence service endpoint constants.

    Naming endpoints are relative to the naming root
    ({scheme}://{host}:{port}/{naming_path}); service endpoints are relative
    to the endpoint bound in the naming service.
    """

    # -------------------------------------------------------------------------
    # Naming
    # -------------------------------------------------------------------------
    NAMING_BINDING: str = "{name}"

    # -------------------------------------------------------------------------
    # Service home
    # -------------------------------------------------------------------------
    SESSIONS: str = "sessions"

    # -------------------------------------------------------------------------
    # Persistent objects
    # -------------------------------------------------------------------------
    POS: str = "pos"

    # -------------------------------------------------------------------------
    # Managed objects
    # -------------------------------------------------------------------------
    MOS: str = "mos"
    MO_ENTITY_ADDRESS_INFO: str = "mos/{po_id}/entityAddressInfo"
