# style.py

from typing import Any, Callable, List, Optional

from .attributes import AttrLike
from .codec import set_code, unset_code
from .context import OutputContext, default_context

class Style:
    """
    An ordered list of SGR attributes with an optional on/off override.

    ``add`` appends in place and returns the style, so styles are built
    by chaining. ``enabled`` is None to follow the output context, or
    True/False to force colors on or off.
    """
    def __init__(self, *attrs: AttrLike, context: Optional[OutputContext] = None):
        self.attrs: List[AttrLike] = list(attrs)
        self.enabled: Optional[bool] = None
        self._context = context

    def __repr__(self) -> str:
        codes = ', '.join(str(int(a)) for a in self.attrs)
        return f"Style({codes}, enabled={self.enabled})"

    @property
    def context(self) -> OutputContext:
        return self._context or default_context()

    def add(self, *attrs: AttrLike) -> 'Style':
        self.attrs.extend(attrs)
        return self

    def enable_color(self) -> 'Style':
        self.enabled = True
        return self

    def disable_color(self) -> 'Style':
        self.enabled = False
        return self

    def is_enabled(self) -> bool:
        """Resolve the override against the context's colorability."""
        if self.enabled is not None:
            return self.enabled
        return self.context.colorable

    def equals(self, other: Optional['Style']) -> bool:
        """Same number of attributes, each present in the other style."""
        if other is None:
            return False
        if len(self.attrs) != len(other.attrs):
            return False
        theirs = {int(a) for a in other.attrs}
        return all(int(a) in theirs for a in self.attrs)

    # Escape sequences

    def set_code(self) -> str:
        return set_code(self.attrs)

    def unset_code(self) -> str:
        return unset_code(self.attrs)

    def wrap(self, text: str) -> str:
        """Surround text with this style's set and unset sequences."""
        if not self.is_enabled():
            return text
        return self.set_code() + text + self.unset_code()

    # String rendering

    @staticmethod
    def _join(args) -> str:
        return ' '.join(str(a) for a in args)

    @staticmethod
    def _format(fmt: str, args) -> str:
        return fmt % args if args else fmt

    def sprint(self, *args: Any) -> str:
        return self.wrap(self._join(args))

    def sprintf(self, fmt: str, *args: Any) -> str:
        return self.wrap(self._format(fmt, args))

    def sprintln(self, *args: Any) -> str:
        """Like sprint, but the reset lands before a single trailing newline."""
        # println-style joining ends in one newline, which moves outside the reset
        text = self._join(args) + '\n'
        return self.wrap(text[:-1]) + text[-1]

    # Writing to sinks; write errors reach the caller unchanged

    def fprint(self, sink: Any, *args: Any) -> Any:
        return sink.write(self.sprint(*args))

    def fprintf(self, sink: Any, fmt: str, *args: Any) -> Any:
        return sink.write(self.sprintf(fmt, *args))

    def fprintln(self, sink: Any, *args: Any) -> Any:
        return sink.write(self.sprintln(*args))

    def print(self, *args: Any) -> Any:
        return self.fprint(self.context.output, *args)

    def printf(self, fmt: str, *args: Any) -> Any:
        return self.fprintf(self.context.output, fmt, *args)

    def println(self, *args: Any) -> Any:
        return self.fprintln(self.context.output, *args)

    def set(self) -> 'Style':
        """Switch the style on for everything written next to the context sink."""
        return self.set_writer(self.context.output)

    def unset(self) -> 'Style':
        return self.unset_writer(self.context.output)

    def set_writer(self, sink: Any) -> 'Style':
        if self.is_enabled():
            sink.write(self.set_code())
        return self

    def unset_writer(self, sink: Any) -> 'Style':
        if self.is_enabled():
            sink.write(self.unset_code())
        return self

    # Bound helpers

    def sprint_func(self) -> Callable[..., str]:
        return lambda *args: self.sprint(*args)

    def sprintf_func(self) -> Callable[..., str]:
        return lambda fmt, *args: self.sprintf(fmt, *args)

    def sprintln_func(self) -> Callable[..., str]:
        return lambda *args: self.sprintln(*args)

    def print_func(self) -> Callable[..., Any]:
        return lambda *args: self.print(*args)

    def printf_func(self) -> Callable[..., Any]:
        return lambda fmt, *args: self.printf(fmt, *args)

    def println_func(self) -> Callable[..., Any]:
        return lambda *args: self.println(*args)

    def value(self, obj: Any) -> 'StyledValue':
        """Bind a value to a copy of this style for deferred rendering."""
        from .value import StyledValue
        styled = StyledValue(obj, *self.attrs, context=self._context)
        styled.style.enabled = self.enabled
        return styled


def new(*attrs: AttrLike) -> Style:
    return Style(*attrs)


__all__ = ['Style', 'new']
