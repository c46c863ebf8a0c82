import logging
from typing import Protocol

from blinker import Signal


class LoggerProtocol(Protocol):
    """Protocol for objects that can be used as loggers"""
    def error(self, msg : object, *args, **kwargs) -> None: ...
    def warning(self, msg : object, *args, **kwargs) -> None: ...
    def info(self, msg : object, *args, **kwargs) -> None: ...


class SubtitleEvents:
    """
    Container for blinker signals emitted while subtitle tracks are loaded.

    Signals:
        track_loaded(sender, index, track, cues):
            Emitted when a track has been fetched and parsed (cues may be empty)

        error(sender, message):
            Signals that a track could not be loaded

        warning(sender, message):
            Signals a problem that did not prevent loading

        info(sender, message):
            General informational message
    """
    track_loaded: Signal
    error: Signal
    warning: Signal
    info: Signal

    def __init__(self):
        self.track_loaded = Signal("subtitle-track-loaded")

        self.error = Signal("subtitle-error")
        self.warning = Signal("subtitle-warning")
        self.info = Signal("subtitle-info")

        self._default_error_wrapper = lambda sender, message: logging.error(message)
        self._default_warning_wrapper = lambda sender, message: logging.warning(message)
        self._default_info_wrapper = lambda sender, message: logging.info(message)

    def connect_default_loggers(self):
        """
        Connect default logging handlers to logging signals.
        """
        self.error.connect(self._default_error_wrapper, weak=False)
        self.warning.connect(self._default_warning_wrapper, weak=False)
        self.info.connect(self._default_info_wrapper, weak=False)

    def disconnect_default_loggers(self):
        """
        Disconnect default logging handlers from the signals.
        """
        self.error.disconnect(self._default_error_wrapper)
        self.warning.disconnect(self._default_warning_wrapper)
        self.info.disconnect(self._default_info_wrapper)

    def connect_logger(self, logger : LoggerProtocol):
        """
        Connect a custom logger to the logging signals.

        Args:
            logger: A logger-like object with error, warning, and info methods
        """
        def error_wrapper(sender, message):
            logger.error(message)

        def warning_wrapper(sender, message):
            logger.warning(message)

        def info_wrapper(sender, message):
            logger.info(message)

        # Closures would be garbage collected with weak references
        self.error.connect(error_wrapper, weak=False)
        self.warning.connect(warning_wrapper, weak=False)
        self.info.connect(info_wrapper, weak=False)
