# context.py

import sys
from typing import Any, Optional, TextIO

from .detection import ColorDetector, default_detector

class OutputContext:
    """
    An output sink together with its colorability.

    Colorability is computed once when the sink is installed; call
    ``set_output`` again (or ``refresh``) to re-evaluate. ``disable`` and
    ``enable`` pin the answer regardless of the sink.
    """
    def __init__(self, sink: Optional[TextIO] = None,
                 detector: Optional[ColorDetector] = None):
        self.detector = detector or default_detector()
        self._output: Any = None
        self._colorable = False
        self._forced: Optional[bool] = None
        self.set_output(sink if sink is not None else sys.stderr)

    @property
    def output(self) -> Any:
        return self._output

    @property
    def colorable(self) -> bool:
        if self._forced is not None:
            return self._forced
        return self._colorable

    def set_output(self, sink: Any) -> None:
        """Install a new sink and recompute its colorability."""
        self._output = sink
        self.refresh()

    def refresh(self) -> bool:
        self._colorable = self.detector.is_colorable(self._output)
        return self._colorable

    def disable(self) -> None:
        self._forced = False

    def enable(self) -> None:
        self._forced = True

    def reset_override(self) -> None:
        """Go back to following the sink's detected colorability."""
        self._forced = None

    def write(self, text: str) -> Any:
        return self._output.write(text)


# Process-wide default; created once at import with stderr
_default_context = OutputContext()


def default_context() -> OutputContext:
    return _default_context


def set_output(sink: Any) -> None:
    """Replace the default sink. Not meant to race with concurrent printing."""
    _default_context.set_output(sink)


def output() -> Any:
    return _default_context.output


def disable() -> None:
    """Force colors off for the default context, whatever the sink."""
    _default_context.disable()


def enable() -> None:
    _default_context.enable()


__all__ = ['OutputContext', 'default_context', 'disable', 'enable', 'set_output', 'output']
