# codec.py

from typing import Iterable
from .attributes import Attribute, AttrLike, RESET_ATTRIBUTES

ESCAPE = '\x1b'
RESET_SEQUENCE = f'{ESCAPE}[{int(Attribute.RESET)}m'

SGR = lambda seq: f'{ESCAPE}[{seq}m'  # Core escape builder


def sequence(attrs: Iterable[AttrLike]) -> str:
    """Join attribute codes into an SGR parameter list, e.g. ``1;31``."""
    return ';'.join(str(int(a)) for a in attrs)


def reset_code(attr: AttrLike) -> int:
    """Return the code that undoes a single attribute.

    Effects with a dedicated reset (bold, italic, ...) use it; anything
    else, colors and raw extended codes included, falls back to 0.
    """
    return int(RESET_ATTRIBUTES.get(int(attr), Attribute.RESET))


def set_code(attrs: Iterable[AttrLike]) -> str:
    """Escape sequence that switches the given attributes on, in order."""
    return SGR(sequence(attrs))


def unset_code(attrs: Iterable[AttrLike]) -> str:
    """
    Escape sequence that switches the given attributes off.

    Every attribute contributes its own reset code in the same relative
    order, so ``[BOLD, FG_RED]`` yields ``ESC[22;0m``.
    """
    return SGR(sequence(reset_code(a) for a in attrs))


def sgr_bytes(*attrs: AttrLike) -> bytes:
    """
    Low-level byte builder used by styled values.

    With no attributes this emits the bold code rather than an empty
    sequence; styled values created without attributes render bold.
    """
    codes = sequence(attrs) if attrs else str(int(Attribute.BOLD))
    return SGR(codes).encode('ascii')


RESET_BYTES = RESET_SEQUENCE.encode('ascii')
