"""
Base Service.

Base class for the use cases. Services depend on repository protocols,
never on sessions or ORM models, so they run the same against the SQL
adapters and the in-memory fakes used in tests.

Usage:
    from notafacil.backend.services.base import BaseService

    class ArchiveNoteService(BaseService):
        def __init__(self, notes: NoteRepository) -> None:
            super().__init__()
            self.notes = notes

        async def execute(self, note_id: str) -> Note:
            self._log_operation("Archiving note", note_id=note_id)
            ...
"""

from typing import Any

from notafacil.backend.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - A logger named after the concrete service module
    - Structured operation/debug logging helpers
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
