"""Domain models for the EntityAddressInfo creation handler."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .constants import EAI_NAMESPACE, EAI_TYPE, EAI_VERSION, TARGET_NAMESPACE_KEYS


class Bucket(str, Enum):
    """Storage partition selector of the persistence service."""

    LIVE = "Live"

    @property
    def wire_value(self) -> str | None:
        """Value sent to the service. The live bucket is addressed as null."""
        if self is Bucket.LIVE:
            return None
        return self.value


@dataclass(frozen=True)
class EntityAddressInfo:
    """
    EntityAddressInfo PO as sent to create_po.

    Only the id returned by the service is kept after creation.
    """

    ne_type: str
    platform_type: str
    namespace: str = EAI_NAMESPACE
    type_name: str = EAI_TYPE
    version: str = EAI_VERSION

    @property
    def target_namespace_keys(self) -> list[str]:
        """Ordered [neType, platformType] pair."""
        return [self.ne_type, self.platform_type]

    def attributes(self) -> dict[str, Any]:
        """Attribute mapping for create_po."""
        return {TARGET_NAMESPACE_KEYS: self.target_namespace_keys}
