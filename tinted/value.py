# value.py

from typing import Any, Optional

from prompt_toolkit.formatted_text import ANSI
from rich.text import Text

from .attributes import AttrLike
from .codec import RESET_BYTES, sgr_bytes
from .context import OutputContext
from .style import Style

class StyledValue:
    """
    A value paired with a style, rendered only when converted.

    ``str()`` and ``bytes()`` respect the output context and fall back to
    the plain value when colors are off. Formatting (``format()``,
    f-strings) always emits escape codes, since a format spec carries no
    knowledge of the destination; use it only for sinks known to be
    colorable.
    """
    def __init__(self, value: Any, *attrs: AttrLike, context: Optional[OutputContext] = None):
        self._value = value
        self.style = Style(*attrs, context=context)

    def __repr__(self) -> str:
        return f"StyledValue({self._value!r}, {self.style!r})"

    @property
    def value(self) -> Any:
        return self._value

    def add(self, *attrs: AttrLike) -> 'StyledValue':
        self.style.add(*attrs)
        return self

    def _escaped(self, content: str) -> bytes:
        return sgr_bytes(*self.style.attrs) + content.encode('utf-8') + RESET_BYTES

    def render(self) -> bytes:
        """Raw serialization, wrapped in escape codes when colors are on."""
        content = str(self._value)
        if not self.style.is_enabled():
            return content.encode('utf-8')
        return self._escaped(content)

    def __bytes__(self) -> bytes:
        return self.render()

    def __str__(self) -> str:
        return self.render().decode('utf-8')

    def __format__(self, format_spec: str) -> str:
        return self._escaped(format(self._value, format_spec)).decode('utf-8')

    def __rich__(self) -> Text:
        # rich strips or keeps the styling according to its own console
        return Text.from_ansi(format(self, ''))

    def __pt_formatted_text__(self):
        return ANSI(format(self, '')).__pt_formatted_text__()


__all__ = ['StyledValue']
