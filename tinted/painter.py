# painter.py

import sys
from typing import Any, Optional

from .codec import ESCAPE, RESET_SEQUENCE
from .detection import ColorDetector, default_detector

# SGR codes as the painter writes them
CODES = {
    'black': '30', 'red': '31', 'green': '32', 'yellow': '33',
    'blue': '34', 'magenta': '35', 'cyan': '36', 'white': '37', 'gray': '90',
    'black_bg': '40', 'red_bg': '41', 'green_bg': '42', 'yellow_bg': '43',
    'blue_bg': '44', 'magenta_bg': '45', 'cyan_bg': '46', 'white_bg': '47',
    'reset': '0', 'bold': '1', 'dim': '2', 'italic': '3', 'underline': '4',
    'inverse': '7', 'hidden': '8', 'strikeout': '9',
}

class Painter:
    """
    Quick one-call coloring: ``painter.red("failed", "1")``.

    Extra style codes are appended to the color code and the text is
    always closed with a full reset. A painter whose sink is not a
    terminal is disabled and returns plain text; ``enable`` turns it back on.
    """
    def __init__(self, sink: Any = None, detector: Optional[ColorDetector] = None):
        self.detector = detector or default_detector()
        self.disabled = False
        self.output: Any = None
        self.set_output(sink if sink is not None else sys.stdout)

    def set_output(self, sink: Any) -> None:
        """Install a sink; a non-terminal sink disables the painter."""
        self.output = sink
        if not self.detector.is_terminal(sink):
            self.disabled = True

    def disable(self) -> None:
        self.disabled = True

    def enable(self) -> None:
        self.disabled = False

    def paint(self, code: str, msg: Any, *styles: Any) -> str:
        if self.disabled:
            return str(msg)
        # styles may be code strings or Attribute members
        params = ';'.join([code] + [s if isinstance(s, str) else str(int(s)) for s in styles])
        return f"{ESCAPE}[{params}m{msg}{RESET_SEQUENCE}"

    def print(self, *args: Any) -> Any:
        return self.output.write(' '.join(str(a) for a in args))

    def println(self, *args: Any) -> Any:
        return self.output.write(' '.join(str(a) for a in args) + '\n')

    def printf(self, fmt: str, *args: Any) -> Any:
        return self.output.write(fmt % args if args else fmt)

    def __getattr__(self, name: str):
        """Expose one painting method per entry in CODES (``red``, ``blue_bg``, ...)."""
        if name in CODES:
            code = CODES[name]
            return lambda msg, *styles: self.paint(code, msg, *styles)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


# Process-wide painter on stdout, created once at import
_default_painter = Painter()


def default_painter() -> Painter:
    return _default_painter


def set_output(sink: Any) -> None:
    _default_painter.set_output(sink)


def output() -> Any:
    return _default_painter.output


def disable() -> None:
    _default_painter.disable()


def enable() -> None:
    _default_painter.enable()


def _painting(name: str):
    code = CODES[name]
    return lambda msg, *styles: _default_painter.paint(code, msg, *styles)


black, red, green, yellow = _painting('black'), _painting('red'), _painting('green'), _painting('yellow')
blue, magenta, cyan, white = _painting('blue'), _painting('magenta'), _painting('cyan'), _painting('white')
gray = _painting('gray')
black_bg, red_bg, green_bg = _painting('black_bg'), _painting('red_bg'), _painting('green_bg')
yellow_bg, blue_bg, magenta_bg = _painting('yellow_bg'), _painting('blue_bg'), _painting('magenta_bg')
cyan_bg, white_bg = _painting('cyan_bg'), _painting('white_bg')
reset, bold, dim, italic = _painting('reset'), _painting('bold'), _painting('dim'), _painting('italic')
underline, inverse = _painting('underline'), _painting('inverse')
hidden, strikeout = _painting('hidden'), _painting('strikeout')


__all__ = ['CODES', 'Painter', 'default_painter', 'disable', 'enable', 'output', 'set_output'] + list(CODES)
