"""Pytest configuration and shared fixtures.

Fixtures are organized by category:
- Configuration fixtures: valid handler properties and contexts
- Mock fixtures: naming context, service home and service handle
- Handler fixtures: initialized handler wired to the mocks
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
import structlog

from src.eai_creation.config import PropertiesConfiguration
from src.eai_creation.constants import (
    NE_TYPE_ATTR,
    PLATFORM_TYPE_ATTR,
    PTR_FDN,
    REMOTE_HOST_ATTR,
    REMOTE_PORT_ATTR,
)
from src.eai_creation.handler import EaiCreationHandler
from src.eai_creation.remote.client import RemoteDataPersistenceClient
from src.eai_creation.remote.naming import HttpNamingContext, HttpServiceHome
from src.eai_creation.remote.response_models import ManagedObjectDto

EAI_PO_ID = 1111
MO_PO_ID = 2222
MO_FDN = "Me=test,MeC=test,ENodeBFunction=1"
REMOTE_HOST = "127.0.0.1"
REMOTE_PORT = "3528"
NE_TYPE = "NeType"
PLATFORM_TYPE = "PlatformType"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def valid_properties() -> dict[str, Any]:
    """Handler properties with every required key set."""
    return {
        REMOTE_HOST_ATTR: REMOTE_HOST,
        REMOTE_PORT_ATTR: REMOTE_PORT,
        PTR_FDN: MO_FDN,
        NE_TYPE_ATTR: NE_TYPE,
        PLATFORM_TYPE_ATTR: PLATFORM_TYPE,
    }


@pytest.fixture
def configuration(valid_properties: dict[str, Any]) -> PropertiesConfiguration:
    """PropertiesConfiguration over the valid properties."""
    return PropertiesConfiguration(properties=valid_properties)


@pytest.fixture
def handler_context(configuration: PropertiesConfiguration) -> MagicMock:
    """Event handler context returning the valid configuration."""
    ctx = MagicMock()
    ctx.get_event_handler_configuration.return_value = configuration
    return ctx


# =============================================================================
# Mock Remote Fixtures
# =============================================================================


@pytest.fixture
def managed_object() -> ManagedObjectDto:
    """The target MO as returned by get_mo."""
    return ManagedObjectDto.model_validate({"poId": MO_PO_ID, "fdn": MO_FDN})


@pytest.fixture
def mock_service(managed_object: ManagedObjectDto) -> MagicMock:
    """Service handle returning EAI id 1111 and the target MO."""
    service = MagicMock(spec=RemoteDataPersistenceClient)
    service.create_po.return_value = EAI_PO_ID
    service.get_mo.return_value = managed_object
    service.set_entity_address_info.return_value = None
    return service


@pytest.fixture
def mock_home(mock_service: MagicMock) -> MagicMock:
    """Service home creating the mock service handle."""
    home = MagicMock(spec=HttpServiceHome)
    home.create.return_value = mock_service
    return home


@pytest.fixture
def mock_naming_context(mock_home: MagicMock) -> MagicMock:
    """Naming context resolving any location to the mock home."""
    naming = MagicMock(spec=HttpNamingContext)
    naming.lookup.return_value = mock_home
    return naming


# =============================================================================
# Handler Fixtures
# =============================================================================


@pytest.fixture
def handler(mock_naming_context: MagicMock) -> EaiCreationHandler:
    """Handler wired to the mock naming context, not yet initialized."""
    return EaiCreationHandler(naming_context=mock_naming_context)


@pytest.fixture
def initialized_handler(
    handler: EaiCreationHandler, handler_context: MagicMock
) -> EaiCreationHandler:
    """Handler after a successful init()."""
    handler.init(handler_context)
    return handler
