# detection/__init__.py

import os
import sys
from typing import Any, Optional, Protocol, runtime_checkable

from ..config import ColorConfig, DEFAULT_CONFIG
from ..logger import Logger
from .console import Console, WindowsConsole, get_console, is_cygwin_pipe_name

@runtime_checkable
class ColorCapable(Protocol):
    """A sink that decides for itself whether it wants ANSI codes."""
    def colorable(self) -> bool: ...
    def set_colorable(self, flag: bool) -> None: ...


class ColorDetector:
    """
    Decides whether ANSI codes should be written to a sink.

    Resolution order:
    1. a sink implementing ColorCapable answers for itself;
    2. stdout/stderr additionally honour NO_COLOR and TERM=dumb;
    3. everything else needs a terminal file descriptor.

    Nothing is cached: each call re-examines the sink.
    """
    def __init__(self, config: Optional[ColorConfig] = None,
                 console: Optional[Console] = None, logger=None):
        """
        Args:
            config: Environment settings; defaults to the live process environment
            console: Platform hooks; defaults to the running platform's
            logger: Optional Logger for debug traces of each decision
        """
        self.config = config or DEFAULT_CONFIG
        self.logger = logger or Logger(__name__)
        self.console = console or get_console(logger=self.logger)

    def is_colorable(self, sink: Any) -> bool:
        if isinstance(sink, ColorCapable):
            flag = bool(sink.colorable())
            self.logger.debug(f"Sink {type(sink).__name__} reports colorable={flag}")
            return flag

        if self.is_standard_stream(sink):
            if self.config.color_disabled():
                self.logger.debug(f"{self.config.no_color_env} is set, color disabled")
                return False
            if self.config.is_dumb_terminal():
                self.logger.debug(f"{self.config.term_env}={self.config.dumb_term}, color disabled")
                return False

        return self.is_terminal(sink)

    @staticmethod
    def is_standard_stream(sink: Any) -> bool:
        return sink is not None and any(
            sink is s for s in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)
        )

    def file_descriptor(self, sink: Any) -> Optional[int]:
        """Return the sink's descriptor, or None if it has none."""
        fileno = getattr(sink, 'fileno', None)
        if not callable(fileno):
            return None
        try:
            return fileno()
        except (OSError, ValueError) as e:
            # io.UnsupportedOperation for StringIO, ValueError for closed files
            self.logger.debug(f"No file descriptor for {type(sink).__name__}: {e}")
            return None

    def is_terminal(self, sink: Any) -> bool:
        """OS-level check: an interactive terminal or a Cygwin/MSYS pty."""
        fd = self.file_descriptor(sink)
        if fd is None:
            return False
        if os.isatty(fd):
            enabled = self.console.enable_virtual_terminal(fd)
            if not enabled:
                self.logger.debug(f"Virtual terminal mode unavailable on fd {fd}")
            return enabled
        return self.console.is_cygwin_terminal(fd)


_default_detector = ColorDetector()


def default_detector() -> ColorDetector:
    return _default_detector


def is_colorable(sink: Any) -> bool:
    """Whether ANSI codes should be emitted to ``sink``."""
    return default_detector().is_colorable(sink)


__all__ = [
    'ColorCapable', 'ColorDetector', 'Console', 'WindowsConsole',
    'default_detector', 'get_console', 'is_colorable', 'is_cygwin_pipe_name',
]
