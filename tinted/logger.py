import sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            # "-" or no file sends records to stderr, next to the styled output
            target = log_file if log_file and log_file != '-' else '-'
            handler_name = f"tinted:{target}"
            # one handler per destination, however many wrappers share the name
            if not any(h.get_name() == handler_name for h in self._logger.handlers):
                handler = logging.StreamHandler(sys.stderr) if target == '-' else logging.FileHandler(target)
                handler.set_name(handler_name)
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        elif not any(isinstance(h, logging.NullHandler) for h in self._logger.handlers):
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
