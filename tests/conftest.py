# conftest.py

import os
import sys
import io
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tinted.config import ColorConfig
from tinted.detection import ColorDetector, Console


class TrackingConsole(Console):
    """Console hooks that record calls and answer from fixed flags."""
    def __init__(self, vt_ok=True, cygwin=False):
        self.vt_ok = vt_ok
        self.cygwin = cygwin
        self.vt_calls = []

    def enable_virtual_terminal(self, fd):
        self.vt_calls.append(fd)
        return self.vt_ok

    def is_cygwin_terminal(self, fd):
        return self.cygwin


class CapableSink(io.StringIO):
    """In-memory sink exposing the color capability interface."""
    def __init__(self, flag=False):
        super().__init__()
        self.flag = flag

    def colorable(self):
        return self.flag

    def set_colorable(self, flag):
        self.flag = flag


@pytest.fixture
def tty_sink():
    """A text stream whose descriptor is the slave end of a pseudo-terminal."""
    if not hasattr(os, 'openpty'):
        pytest.skip("pseudo-terminals not available")
    master, slave = os.openpty()
    sink = os.fdopen(slave, 'w')
    try:
        yield sink
    finally:
        sink.close()
        os.close(master)


@pytest.fixture
def make_detector():
    def factory(environ=None, console=None):
        config = ColorConfig(environ={} if environ is None else environ)
        return ColorDetector(config=config, console=console or TrackingConsole())
    return factory
