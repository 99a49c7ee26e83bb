"""EntityAddressInfo creation handler for the mediation add-node flow."""

from .config import HandlerConfig, PropertiesConfiguration
from .handler import EaiCreationHandler, HandlerState

__version__ = "1.0.0"
__all__ = ["EaiCreationHandler", "HandlerState", "HandlerConfig", "PropertiesConfiguration"]
