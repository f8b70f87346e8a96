# namespace.py

import threading
from typing import Dict, Optional

from .attributes import FG_EXTENDED, EXTENDED_INDEXED
from .style import Style
from .value import StyledValue

# 256-color indexes that stay readable on both light and dark themes
PALETTE = (
    20, 21, 26, 27, 32, 33, 38, 39, 40, 41,
    42, 43, 44, 45, 56, 57, 62, 63, 68, 69,
    74, 75, 76, 77, 78, 79, 80, 81, 92, 93,
    98, 99, 112, 113, 128, 129, 134, 135,
    148, 149, 160, 161, 162, 163, 164, 165,
    166, 167, 168, 169, 170, 171, 172, 173,
    178, 179, 184, 185, 196, 197, 198, 199,
    200, 201, 202, 203, 204, 205, 206, 207,
    208, 209, 214, 215, 220, 221,
)

_INT32 = 1 << 32


def _to_int32(n: int) -> int:
    n &= _INT32 - 1
    return n - _INT32 if n >= 1 << 31 else n


def name_hash(name: str) -> int:
    """``hash * 31 + code point`` over the name, in signed 32-bit arithmetic."""
    h = 0
    for ch in name:
        h = _to_int32((h << 5) - h + ord(ch))
    return h


def select_color(name: str) -> int:
    """Pick a palette color for a name; the same name always gets the same one."""
    return PALETTE[abs(name_hash(name)) % len(PALETTE)]


def color_for(name: str) -> Style:
    return Style(FG_EXTENDED, EXTENDED_INDEXED, select_color(name))


class NamespaceRegistry:
    """
    Lazily assigned, process-lifetime namespace colors.

    The lookup and the insert for a new name happen under one lock, so
    concurrent callers always share a single StyledValue per name.
    """
    def __init__(self):
        self._namespaces: Dict[str, StyledValue] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._namespaces)

    def __contains__(self, name: str) -> bool:
        return name in self._namespaces

    def get(self, name: str) -> StyledValue:
        with self._lock:
            ns = self._namespaces.get(name)
            if ns is None:
                ns = StyledValue(name, FG_EXTENDED, EXTENDED_INDEXED, select_color(name))
                self._namespaces[name] = ns
            return ns


_registry: Optional[NamespaceRegistry] = None
_registry_lock = threading.Lock()


def default_registry() -> NamespaceRegistry:
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = NamespaceRegistry()
        return _registry


def namespace(name: str) -> StyledValue:
    """Colored tag for a log component name, e.g. ``f"{namespace('db')} ready"``."""
    return default_registry().get(name)


__all__ = ['PALETTE', 'NamespaceRegistry', 'color_for', 'name_hash', 'namespace', 'select_color']
