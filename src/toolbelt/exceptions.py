"""Exceptions raised by toolbelt helpers.

Most helpers report "nothing found" by returning None. The exceptions here
cover the two cases that are not runtime conditions to recover from: a
caller breaking a usage contract, and the platform refusing to provide a
directory that is guaranteed to exist.
"""

from pathlib import Path

from toolbelt.config import settings
from toolbelt.utils.logging import get_logger

logger = get_logger(__name__)


class ToolbeltError(Exception):
    """Base exception for all toolbelt errors."""


class ContractViolation(ToolbeltError, AssertionError):
    """Raised when a helper is used outside of its expected context.

    This is a programming error in the caller (for example performing a
    retro transition from a screen that is not inside a navigation stack),
    never something to catch and recover from.
    """


class PlatformDirectoryError(ToolbeltError):
    """Raised when a well-known application directory cannot be provided.

    These directories are expected to always exist, so the failure is
    treated as fatal.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the error with optional path context.

        Args:
            message: Human-readable error description.
            path: Directory that could not be resolved or created.
        """
        self.path = Path(path) if path else None
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


def assertion_failure(message: str, **context: object) -> None:
    """Report a broken invariant.

    Always logs the failure. When ``settings.DEBUG_ASSERTIONS`` is on the
    failure is also raised, mirroring a debug-build assertion; otherwise the
    caller continues with its degraded path.

    Args:
        message: Description of the violated invariant.
        **context: Extra fields attached to the log event.

    Raises:
        ContractViolation: If debug assertions are enabled.
    """
    logger.error("assertion_failure", reason=message, **context)
    if settings.DEBUG_ASSERTIONS:
        raise ContractViolation(message)
