# detection/console.py

import ctypes
import re
import sys
import threading
from typing import Dict, Optional

# \msys-<hex>-pty<N>-from-master, \cygwin-<hex>-pty<N>-to-master, ...
CYGWIN_PIPE_PATTERN = re.compile(
    r'^\\(?:msys|cygwin)-[0-9a-fA-F]+-pty\d+-(?:from|to)-master'
)

ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
FILE_TYPE_PIPE = 0x0003
FILE_NAME_INFO_CLASS = 2
MAX_PATH = 260


def is_cygwin_pipe_name(name: str) -> bool:
    """True if a named-pipe path looks like a Cygwin/MSYS pseudo-terminal."""
    return bool(CYGWIN_PIPE_PATTERN.match(name or ''))


class Console:
    """
    Platform hooks used by terminal detection.

    The base class is the no-op flavour for platforms where terminals
    understand ANSI natively and pseudo-terminals are plain ttys.
    """

    def enable_virtual_terminal(self, fd: int) -> bool:
        """Make a terminal descriptor interpret ANSI codes; True on success."""
        return True

    def is_cygwin_terminal(self, fd: int) -> bool:
        return False


class FILE_NAME_INFO(ctypes.Structure):
    _fields_ = [
        ('FileNameLength', ctypes.c_ulong),
        ('FileName', ctypes.c_wchar * MAX_PATH),
    ]


class WindowsConsole(Console):
    """
    Console hooks backed by ``kernel32``.

    Enabling virtual-terminal processing happens at most once per console
    handle; the outcome is remembered and replayed on later calls.
    """

    def __init__(self, logger=None):
        self.logger = logger
        self._vt_modes: Dict[int, bool] = {}
        self._lock = threading.Lock()

    def _handle(self, fd: int) -> Optional[int]:
        import msvcrt
        try:
            return msvcrt.get_osfhandle(fd)
        except OSError:
            return None

    def _kernel32(self):
        return ctypes.windll.kernel32

    def enable_virtual_terminal(self, fd: int) -> bool:
        handle = self._handle(fd)
        if handle is None:
            return False
        with self._lock:
            if handle not in self._vt_modes:
                self._vt_modes[handle] = self._set_vt_mode(handle)
            return self._vt_modes[handle]

    def _set_vt_mode(self, handle: int) -> bool:
        kernel32 = self._kernel32()
        mode = ctypes.c_ulong()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            if self.logger:
                self.logger.debug(f"GetConsoleMode failed for handle {handle}")
            return False
        # Only Windows 10 and later accept this flag
        if not kernel32.SetConsoleMode(handle, mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING):
            if self.logger:
                self.logger.debug(f"SetConsoleMode refused virtual terminal mode for handle {handle}")
            return False
        return True

    def is_cygwin_terminal(self, fd: int) -> bool:
        handle = self._handle(fd)
        if handle is None:
            return False

        kernel32 = self._kernel32()
        if kernel32.GetFileType(handle) != FILE_TYPE_PIPE:
            return False

        info = FILE_NAME_INFO()
        if not kernel32.GetFileInformationByHandleEx(
            handle, FILE_NAME_INFO_CLASS, ctypes.byref(info), ctypes.sizeof(info)
        ):
            return False
        return is_cygwin_pipe_name(info.FileName[:info.FileNameLength // 2])


_console: Console = WindowsConsole() if sys.platform == 'win32' else Console()


def get_console(logger=None) -> Console:
    """Return the console hooks for the running platform."""
    if logger is not None and isinstance(_console, WindowsConsole) and _console.logger is None:
        _console.logger = logger
    return _console


__all__ = ['Console', 'WindowsConsole', 'get_console', 'is_cygwin_pipe_name']
