# writer.py

from typing import Any, AnyStr, Optional

from .detection import ColorDetector, default_detector
from .strip import strip_ansi

class ColorableWriter:
    """
    Write-through adapter that removes ANSI codes for plain sinks.

    Colorability is decided once from the wrapped sink and can be changed
    with ``set_colorable``. The adapter implements the color capability
    itself, so installing it as a context sink keeps that decision.
    """
    def __init__(self, output: Any, detector: Optional[ColorDetector] = None):
        self.output = output
        self.colored = (detector or default_detector()).is_colorable(output)

    def write(self, data: AnyStr) -> Any:
        if not self.colored:
            return self.output.write(strip_ansi(data))
        return self.output.write(data)

    def colorable(self) -> bool:
        return self.colored

    def set_colorable(self, flag: bool) -> None:
        self.colored = flag

    def flush(self) -> None:
        flush = getattr(self.output, 'flush', None)
        if flush:
            flush()


def new_writer(output: Any) -> ColorableWriter:
    return ColorableWriter(output)


__all__ = ['ColorableWriter', 'new_writer']
