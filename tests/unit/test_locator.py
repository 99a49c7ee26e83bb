"""Unit tests for RemoteServiceLocator and narrowing."""

from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from src.eai_creation.remote.locator import RemoteServiceLocator
from src.eai_creation.remote.service import PersistenceServiceHome, narrow
from src.eai_creation.utils.exceptions import (
    NamingError,
    NarrowingError,
    RemoteInvocationError,
    ServiceCreateError,
    ServiceLookupError,
)

LOOKUP_STRING = "corbaname:iiop:10.0.0.5:3528#RemoteDataPersistenceService"


class FakeHome:
    """Minimal service home."""

    def __init__(self, service):
        self.service = service

    def create(self):
        return self.service


class TestNarrow:
    """Test narrow()."""

    def test_narrow_accepts_home(self):
        """Test an object with create() narrows to a service home."""
        home = FakeHome(MagicMock())

        assert narrow(home, PersistenceServiceHome) is home

    @pytest.mark.parametrize("obj", [None, object(), "RemoteDataPersistenceService"])
    def test_narrow_rejects_other_objects(self, obj):
        """Test objects without create() cannot be narrowed."""
        with pytest.raises(NarrowingError) as exc_info:
            narrow(obj, PersistenceServiceHome)

        assert "PersistenceServiceHome" in str(exc_info.value)


class TestRemoteServiceLocator:
    """Test RemoteServiceLocator.locate()."""

    def test_locate_returns_created_service(self):
        """Test the handle created by the home is returned."""
        service = MagicMock()
        naming = MagicMock()
        naming.lookup.return_value = FakeHome(service)

        located = RemoteServiceLocator(naming).locate("10.0.0.5", "3528")

        assert located is service
        naming.lookup.assert_called_once_with(LOOKUP_STRING)

    def test_locate_custom_lookup_name(self):
        """Test the well-known name can be overridden."""
        naming = MagicMock()
        naming.lookup.return_value = FakeHome(MagicMock())

        RemoteServiceLocator(naming, lookup_name="dps/Remote").locate("h", "1")

        naming.lookup.assert_called_once_with("corbaname:iiop:h:1#dps/Remote")

    @pytest.mark.parametrize(
        "error",
        [NamingError(LOOKUP_STRING), RemoteInvocationError("refused")],
    )
    def test_lookup_failures(self, error):
        """Test naming and transport failures map to ServiceLookupError."""
        naming = MagicMock()
        naming.lookup.side_effect = error

        with pytest.raises(ServiceLookupError) as exc_info:
            RemoteServiceLocator(naming).locate("10.0.0.5", "3528")

        assert exc_info.value.cause is error
        assert exc_info.value.lookup_string == LOOKUP_STRING

    def test_narrowing_failure(self):
        """Test a resolved object of the wrong kind maps to ServiceLookupError."""
        naming = MagicMock()
        naming.lookup.return_value = object()

        with pytest.raises(ServiceLookupError) as exc_info:
            RemoteServiceLocator(naming).locate("10.0.0.5", "3528")

        assert isinstance(exc_info.value.cause, NarrowingError)

    def test_create_failure(self):
        """Test a failing home create() maps to ServiceLookupError."""
        home = MagicMock()
        home.create.side_effect = ServiceCreateError("refused")
        naming = MagicMock()
        naming.lookup.return_value = home

        with pytest.raises(ServiceLookupError) as exc_info:
            RemoteServiceLocator(naming).locate("10.0.0.5", "3528")

        assert isinstance(exc_info.value.cause, ServiceCreateError)


class TestLocatorLogging:
    """Test the log events emitted by locate()."""

    def test_successful_lookup_logs(self):
        """Test the lookup string is logged before and after the lookup."""
        naming = MagicMock()
        naming.lookup.return_value = FakeHome(MagicMock())

        with capture_logs() as logs:
            RemoteServiceLocator(naming).locate("10.0.0.5", "3528")

        assert logs == [
            {
                "event": "Performing remote lookup",
                "log_level": "debug",
                "lookup_string": LOOKUP_STRING,
            },
            {
                "event": "Remote DPS lookup successful",
                "log_level": "debug",
                "lookup_string": LOOKUP_STRING,
            },
        ]

    def test_failed_lookup_logs_lookup_string(self):
        """Test a lookup failure is logged at error level with the lookup string."""
        naming = MagicMock()
        naming.lookup.side_effect = NamingError(LOOKUP_STRING)

        with capture_logs() as logs, pytest.raises(ServiceLookupError):
            RemoteServiceLocator(naming).locate("10.0.0.5", "3528")

        assert logs[-1] == {
            "event": "Error doing lookup of Remote Data Persistence service",
            "log_level": "error",
            "lookup_string": LOOKUP_STRING,
            "error": f"Name not found: {LOOKUP_STRING}",
        }
        assert "Remote DPS lookup successful" not in [e["event"] for e in logs]
