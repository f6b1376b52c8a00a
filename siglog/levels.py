"""levels.py - The closed set of severities understood by SigLog.

SigLog supports exactly five severities: TRACE, DEBUG, INFO, WARN and ERROR.
Each one maps onto a standard ``logging`` integer level so that records flow
through ordinary handlers, filters and formatters. The standard library has
no TRACE level, so one is registered below DEBUG on import.
"""

import enum
import logging
from typing import Union

TRACE_LEVEL = 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class Level(enum.IntEnum):
    """One of the five supported severities.

    The member value is the ``logging`` level number, so a ``Level`` can be
    passed anywhere the standard library expects an integer level.

    Example:
        >>> Level.WARN == logging.WARNING
        True
        >>> Level.parse("warning")
        <Level.WARN: 30>
    """

    TRACE = TRACE_LEVEL
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def parse(cls, value: Union["Level", str, int]) -> "Level":
        """Coerce ``value`` into a ``Level``.

        Args:
            value: A ``Level``, a case-insensitive level name (``"WARNING"`` is
                accepted as an alias of WARN) or a ``logging`` integer equal to
                one of the five supported levels.

        Returns:
            The matching ``Level`` member.

        Raises:
            ValueError: If ``value`` does not name one of the five levels.
                There is no fallback level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"unknown log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"unsupported log level number: {value}") from None
        raise ValueError(f"unsupported log level: {value!r}")
