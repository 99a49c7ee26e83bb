"""Remote naming and persistence service bindings."""

from .client import RemoteDataPersistenceClient
from .locator import RemoteServiceLocator
from .naming import HttpNamingContext, HttpServiceHome, build_lookup_string, parse_lookup_string
from .response_models import ManagedObjectDto
from .service import NamingContext, PersistenceServiceHome, RemotePersistenceService, narrow

__all__ = [
    "RemoteDataPersistenceClient",
    "RemoteServiceLocator",
    "HttpNamingContext",
    "HttpServiceHome",
    "build_lookup_string",
    "parse_lookup_string",
    "ManagedObjectDto",
    "NamingContext",
    "PersistenceServiceHome",
    "RemotePersistenceService",
    "narrow",
]
