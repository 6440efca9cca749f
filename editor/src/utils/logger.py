"""Global logging and error handling utilities"""
import logging
import sys
import traceback

from constants import LOG_FORMAT, LOG_THROTTLE_EVERY

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def configure_logging(level=logging.WARNING):
    """Configure root logging to stdout with the application format.

    Args:
        level: Logging level (int or level name such as 'DEBUG')
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Shows popup with user message or exception string
        - Logs the full traceback
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    logging.getLogger('EllipseEditor').error("%s", traceback.format_exc())

    message = user_message if user_message else str(e)
    if _main_window:
        # Qt is only needed once a window has been registered
        from PyQt5.QtWidgets import QMessageBox
        QMessageBox.critical(_main_window, title, message)
    else:
        logging.getLogger('EllipseEditor').error("ERROR POPUP (no window): %s - %s", title, message)

    raise e


class ThrottledLogger:
    """Logger wrapper that only emits every Nth call.

    Used for per-pointer-move diagnostics, which would otherwise flood the
    log while dragging.
    """

    def __init__(self, logger, every=LOG_THROTTLE_EVERY, level=logging.DEBUG):
        self.logger = logger
        self.every = max(1, int(every))
        self.level = level
        self._count = 0

    def log(self, msg, *args):
        """Count a call; emit it when the count reaches the period.

        Returns:
            bool: True if this call was emitted
        """
        self._count += 1
        if self._count < self.every:
            return False
        self._count = 0
        self.logger.log(self.level, msg, *args)
        return True

    def reset(self):
        self._count = 0
