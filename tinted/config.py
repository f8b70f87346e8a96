# config.py

import os
from dataclasses import dataclass, field
from typing import Mapping

@dataclass
class ColorConfig:
    """
    Environment settings consulted when the sink is stdout or stderr.

    ``environ`` is read at detection time, so changes to the process
    environment are picked up without rebuilding the config.
    """
    no_color_env: str = 'NO_COLOR'
    term_env: str = 'TERM'
    dumb_term: str = 'dumb'
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    def color_disabled(self) -> bool:
        """True when the disable-color variable holds a non-empty value."""
        return bool(self.environ.get(self.no_color_env, ''))

    def is_dumb_terminal(self) -> bool:
        return self.environ.get(self.term_env) == self.dumb_term


DEFAULT_CONFIG = ColorConfig()
