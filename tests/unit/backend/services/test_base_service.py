"""
Unit Tests for Base Service.

Tests the BaseService logging helpers.
"""

from unittest.mock import patch

from notafacil.backend.services.base import BaseService


class TestBaseServiceInit:
    """Tests for BaseService initialization."""

    def test_init_creates_logger(self):
        """Should create a logger for the service."""
        service = BaseService()

        assert service._logger is not None

    def test_logger_named_after_module(self):
        """Should name the logger after the concrete service module."""
        with patch("notafacil.backend.services.base.get_logger") as mock_get_logger:
            BaseService()

        mock_get_logger.assert_called_once_with("notafacil.backend.services.base")


class TestLoggingMethods:
    """Tests for logging helper methods."""

    def test_log_operation_includes_service_name(self):
        """Should include service class name in log context."""
        service = BaseService()

        with patch.object(service._logger, "info") as mock_info:
            service._log_operation("Creating note", note_id="123")

            mock_info.assert_called_once()
            extra = mock_info.call_args[1]["extra"]
            assert extra["service"] == "BaseService"
            assert extra["note_id"] == "123"

    def test_log_debug_includes_service_name(self):
        """Should include service class name in debug log context."""
        service = BaseService()

        with patch.object(service._logger, "debug") as mock_debug:
            service._log_debug("Processing step", step=1)

            mock_debug.assert_called_once()
            extra = mock_debug.call_args[1]["extra"]
            assert extra["service"] == "BaseService"
            assert extra["step"] == 1

    def test_subclass_name_is_reported(self):
        """Subclasses report their own class name."""

        class ArchiveService(BaseService):
            pass

        service = ArchiveService()

        with patch.object(service._logger, "info") as mock_info:
            service._log_operation("Archiving")

        assert mock_info.call_args[1]["extra"]["service"] == "ArchiveService"
