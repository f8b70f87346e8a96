# helpers.py

from typing import Any, Callable, Dict

from .attributes import Attribute, FOREGROUND_COLORS, HI_FOREGROUND_COLORS
from .context import default_context
from .style import Style

_styles: Dict[int, Style] = {}

def _style(attr: Attribute) -> Style:
    # One shared style per color, following the default context
    if attr not in _styles:
        _styles[attr] = Style(attr)
    return _styles[attr]

def color_print(attr: Attribute, fmt: str, *args: Any) -> Any:
    """printf to the default output, adding a newline when the format lacks one."""
    if not fmt.endswith('\n'):
        fmt += '\n'
    return _style(attr).printf(fmt, *args)

def color_string(attr: Attribute, fmt: str, *args: Any) -> str:
    return _style(attr).sprintf(fmt, *args)

def _printer(attr: Attribute) -> Callable[..., Any]:
    return lambda fmt, *args: color_print(attr, fmt, *args)

def _stringer(attr: Attribute) -> Callable[..., str]:
    return lambda fmt, *args: color_string(attr, fmt, *args)


black, black_string = _printer(Attribute.FG_BLACK), _stringer(Attribute.FG_BLACK)
red, red_string = _printer(Attribute.FG_RED), _stringer(Attribute.FG_RED)
green, green_string = _printer(Attribute.FG_GREEN), _stringer(Attribute.FG_GREEN)
yellow, yellow_string = _printer(Attribute.FG_YELLOW), _stringer(Attribute.FG_YELLOW)
blue, blue_string = _printer(Attribute.FG_BLUE), _stringer(Attribute.FG_BLUE)
magenta, magenta_string = _printer(Attribute.FG_MAGENTA), _stringer(Attribute.FG_MAGENTA)
cyan, cyan_string = _printer(Attribute.FG_CYAN), _stringer(Attribute.FG_CYAN)
white, white_string = _printer(Attribute.FG_WHITE), _stringer(Attribute.FG_WHITE)

hi_black, hi_black_string = _printer(Attribute.FG_HI_BLACK), _stringer(Attribute.FG_HI_BLACK)
hi_red, hi_red_string = _printer(Attribute.FG_HI_RED), _stringer(Attribute.FG_HI_RED)
hi_green, hi_green_string = _printer(Attribute.FG_HI_GREEN), _stringer(Attribute.FG_HI_GREEN)
hi_yellow, hi_yellow_string = _printer(Attribute.FG_HI_YELLOW), _stringer(Attribute.FG_HI_YELLOW)
hi_blue, hi_blue_string = _printer(Attribute.FG_HI_BLUE), _stringer(Attribute.FG_HI_BLUE)
hi_magenta, hi_magenta_string = _printer(Attribute.FG_HI_MAGENTA), _stringer(Attribute.FG_HI_MAGENTA)
hi_cyan, hi_cyan_string = _printer(Attribute.FG_HI_CYAN), _stringer(Attribute.FG_HI_CYAN)
hi_white, hi_white_string = _printer(Attribute.FG_HI_WHITE), _stringer(Attribute.FG_HI_WHITE)


def print(*args: Any) -> Any:
    return default_context().write(' '.join(str(a) for a in args))

def println(*args: Any) -> Any:
    return default_context().write(' '.join(str(a) for a in args) + '\n')

def printf(fmt: str, *args: Any) -> Any:
    return default_context().write(fmt % args if args else fmt)


__all__ = sorted(
    [name for name in FOREGROUND_COLORS] + [name for name in HI_FOREGROUND_COLORS]
    + [f'{name}_string' for name in FOREGROUND_COLORS]
    + [f'{name}_string' for name in HI_FOREGROUND_COLORS]
    + ['color_print', 'color_string', 'print', 'println', 'printf']
)
