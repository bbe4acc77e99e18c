"""Debug-mode gate for diagnostic messages.

Informational messages are only emitted while debug mode is on. Warnings
and errors bypass the gate and are always emitted.
"""

import logging

logger = logging.getLogger(__name__)


def should_emit(level: int, debug: bool) -> bool:
    """Decide whether a message at a given level is emitted.

    Args:
        level: Logging level of the message (e.g., logging.INFO).
        debug: Current debug mode.

    Returns:
        True for warnings and errors, and for lower levels in debug mode.
    """
    return level >= logging.WARNING or debug


class DiagnosticsGate:
    """Owns the debug mode of one storage component.

    Attributes:
        _debug: Whether informational messages are emitted.
        _logger: Logger that receives emitted messages.
    """

    def __init__(self, debug: bool = False, log: logging.Logger | None = None) -> None:
        """Initialize the gate.

        Args:
            debug: Initial debug mode.
            log: Logger to emit through. Defaults to this module's logger.
        """
        self._debug = debug
        self._logger = log or logger

    @property
    def debug(self) -> bool:
        """Current debug mode."""
        return self._debug

    def set_debug_mode(self, enabled: bool) -> None:
        """Turn debug mode on or off.

        Args:
            enabled: New debug mode.
        """
        self.info("Setting debug mode to: %s", enabled)
        self._debug = enabled

    def should_log_info(self) -> bool:
        """Check whether informational messages are currently emitted."""
        return self._debug

    def info(self, msg: str, *args: object) -> None:
        """Emit an informational message if debug mode is on."""
        self._emit(logging.INFO, msg, *args)

    def error(self, msg: str, *args: object) -> None:
        """Emit an error message regardless of debug mode."""
        self._emit(logging.ERROR, msg, *args)

    def _emit(self, level: int, msg: str, *args: object) -> None:
        if should_emit(level, self._debug):
            self._logger.log(level, msg, *args)
