# attributes.py

from enum import IntEnum
from typing import Dict, Union

class Attribute(IntEnum):
    """SGR parameter codes for text effects and the 16 base colors."""

    # Base effects
    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_RAPID = 6
    REVERSE_VIDEO = 7
    CONCEALED = 8
    CROSSED_OUT = 9

    # Effect resets
    RESET_BOLD = 22
    RESET_ITALIC = 23
    RESET_UNDERLINE = 24
    RESET_BLINKING = 25
    RESET_REVERSED = 27
    RESET_CONCEALED = 28
    RESET_CROSSED_OUT = 29

    # Foreground
    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37

    # Foreground, high intensity
    FG_HI_BLACK = 90
    FG_HI_RED = 91
    FG_HI_GREEN = 92
    FG_HI_YELLOW = 93
    FG_HI_BLUE = 94
    FG_HI_MAGENTA = 95
    FG_HI_CYAN = 96
    FG_HI_WHITE = 97

    # Background
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47

    # Background, high intensity
    BG_HI_BLACK = 100
    BG_HI_RED = 101
    BG_HI_GREEN = 102
    BG_HI_YELLOW = 103
    BG_HI_BLUE = 104
    BG_HI_MAGENTA = 105
    BG_HI_CYAN = 106
    BG_HI_WHITE = 107


# Attributes are plain ints on the wire; callers may pass raw codes (38, 5, 208...)
AttrLike = Union[Attribute, int]

# Introducers for the indexed 256-color forms: 38;5;<i> and 48;5;<i>
FG_EXTENDED = 38
BG_EXTENDED = 48
EXTENDED_INDEXED = 5

RESET_ATTRIBUTES: Dict[int, Attribute] = {
    Attribute.BOLD: Attribute.RESET_BOLD,
    Attribute.FAINT: Attribute.RESET_BOLD,
    Attribute.ITALIC: Attribute.RESET_ITALIC,
    Attribute.UNDERLINE: Attribute.RESET_UNDERLINE,
    Attribute.BLINK_SLOW: Attribute.RESET_BLINKING,
    Attribute.BLINK_RAPID: Attribute.RESET_BLINKING,
    Attribute.REVERSE_VIDEO: Attribute.RESET_REVERSED,
    Attribute.CONCEALED: Attribute.RESET_CONCEALED,
    Attribute.CROSSED_OUT: Attribute.RESET_CROSSED_OUT,
}

FOREGROUND_COLORS = {
    'black': Attribute.FG_BLACK,
    'red': Attribute.FG_RED,
    'green': Attribute.FG_GREEN,
    'yellow': Attribute.FG_YELLOW,
    'blue': Attribute.FG_BLUE,
    'magenta': Attribute.FG_MAGENTA,
    'cyan': Attribute.FG_CYAN,
    'white': Attribute.FG_WHITE,
}

HI_FOREGROUND_COLORS = {
    'hi_black': Attribute.FG_HI_BLACK,
    'hi_red': Attribute.FG_HI_RED,
    'hi_green': Attribute.FG_HI_GREEN,
    'hi_yellow': Attribute.FG_HI_YELLOW,
    'hi_blue': Attribute.FG_HI_BLUE,
    'hi_magenta': Attribute.FG_HI_MAGENTA,
    'hi_cyan': Attribute.FG_HI_CYAN,
    'hi_white': Attribute.FG_HI_WHITE,
}
