"""Constants for the EntityAddressInfo creation handler."""

# -----------------------------------------------------------------------------
# Configuration Keys
# -----------------------------------------------------------------------------
# Property names supplied by the mediation engine for this handler.

REMOTE_HOST_ATTR: str = "remoteHost"
REMOTE_PORT_ATTR: str = "remotePort"
PTR_FDN: str = "ptrFdn"
NE_TYPE_ATTR: str = "neType"
PLATFORM_TYPE_ATTR: str = "platformType"

# Extraction order matters: the first empty value is the one reported.
REQUIRED_PROPERTIES: tuple[str, ...] = (
    REMOTE_HOST_ATTR,
    REMOTE_PORT_ATTR,
    PTR_FDN,
    NE_TYPE_ATTR,
    PLATFORM_TYPE_ATTR,
)

# -----------------------------------------------------------------------------
# Remote Lookup
# -----------------------------------------------------------------------------

LOOKUP_PROTOCOL_PREFIX: str = "corbaname:iiop"

# Well-known name the persistence service home is bound under
REMOTE_LOOKUP_NAME: str = "RemoteDataPersistenceService"

# -----------------------------------------------------------------------------
# EntityAddressInfo Record
# -----------------------------------------------------------------------------

EAI_NAMESPACE: str = "MEDIATION"
EAI_TYPE: str = "EntityAddressingInformation"
EAI_VERSION: str = "1.0.0"
TARGET_NAMESPACE_KEYS: str = "targetNamespaceKeys"
