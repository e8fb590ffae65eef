"""
Base Service.

Base class for services providing logging context and common
validation helpers.

Usage:
    from modules.backend.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, repository: NoteRepository) -> None:
            super().__init__()
            self.repo = repository
"""

from typing import Any

from modules.backend.core.exceptions import ValidationError
from modules.backend.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - A logger named after the concrete service module
    - Structured operation/debug logging
    - Index validation for position-based operations
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _validate_positions(self, positions: list[int], size: int) -> None:
        """
        Validate that every position indexes a sequence of the given size.

        Raises:
            ValidationError: If any position is negative or out of range
        """
        invalid = sorted({p for p in positions if p < 0 or p >= size})
        if invalid:
            raise ValidationError(
                "Position out of range",
                details={"invalid_positions": invalid, "size": size},
            )

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
