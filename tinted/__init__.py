# __init__.py

from .logger import Logger
from .config import ColorConfig
from .attributes import Attribute
from .codec import sequence, set_code, unset_code, sgr_bytes, reset_code
from .strip import strip_ansi
from .detection import ColorCapable, ColorDetector, is_colorable
from .context import OutputContext, default_context, disable, enable, set_output, output
from .style import Style, new
from .value import StyledValue
from .writer import ColorableWriter, new_writer
from .namespace import NamespaceRegistry, color_for, namespace, select_color
from .painter import Painter
from . import helpers, painter

__all__ = [
    "Attribute", "ColorCapable", "ColorConfig", "ColorDetector", "ColorableWriter",
    "Logger", "NamespaceRegistry", "OutputContext", "Painter", "Style", "StyledValue",
    "color_for", "default_context", "disable", "enable", "helpers", "is_colorable",
    "namespace", "new", "new_writer", "output", "painter", "reset_code", "select_color",
    "sequence", "set_code", "set_output", "sgr_bytes", "strip_ansi", "unset_code",
]
