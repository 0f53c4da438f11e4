"""
Custom logging configuration for macroabm.

Extends Python's standard logging with a custom DEEP_DEBUG level (5)
for very verbose debugging output.

Log Levels
----------
- CRITICAL (50): Critical errors
- ERROR (40): Errors
- WARNING (30): Warnings (e.g. a whole firm population is insolvent)
- INFO (20): Informational messages (default)
- DEBUG (10): Debug messages
- DEEP_DEBUG (5): Per-firm reinitialization details (bank residual, reset values)

Examples
--------
>>> from macroabm import logging
>>> logger = logging.getLogger("macroabm.events.firms_go_bankrupt")
>>> logger.info("Event executing")
>>> logger.deep("Very verbose output")

Per-event log levels are set through the ``logging`` config key:

>>> import macroabm as ma
>>> model = ma.Model.init(
...     logging={"default_level": "INFO", "events": {"firms_go_bankrupt": "DEBUG"}}
... )
"""

import logging
from typing import Any

(CRITICAL, ERROR, WARNING, INFO, DEBUG) = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)
DEEP_DEBUG = 5
logging.addLevelName(DEEP_DEBUG, "DEEP")


class MacroLogger(logging.Logger):
    """
    Custom logger with DEEP_DEBUG level support.

    Examples
    --------
    >>> logger = MacroLogger("test")
    >>> logger.setLevel(5)  # DEEP_DEBUG
    >>> logger.deep("Very verbose message")
    """

    def deep(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log message at DEEP_DEBUG level (5).

        Parameters
        ----------
        msg : str
            Message format string.
        *args : Any
            Arguments for message formatting.
        **kwargs : Any
            Additional logging kwargs.
        """
        if self.isEnabledFor(DEEP_DEBUG):
            self._log(DEEP_DEBUG, msg, args, **kwargs)


# Make the logging module hand out our subclass from now on
logging.setLoggerClass(MacroLogger)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)


def getLogger(name: str | None = None) -> MacroLogger:
    """
    Get a MacroLogger instance.

    Parameters
    ----------
    name : str, optional
        Logger name. If None, returns root logger.

    Returns
    -------
    MacroLogger
        Logger instance with deep() method.
    """
    return logging.getLogger(name)  # type: ignore[return-value]
