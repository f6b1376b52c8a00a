"""siglog/__init__.py - Public API for the SigLog package.

SigLog is a thin facade over the standard ``logging`` library that prefixes
every message with a caller-chosen *signature*, usually a description of the
method doing the logging. Messages use ``{}`` placeholders, and the signature
is always the first value substituted.

Quick start:
    import logging
    from siglog import Loggeable, get_logger, signed

    # 1. Configure logging as usual; SigLog only creates records
    logging.basicConfig(level=logging.DEBUG)

    # 2. Mix Loggeable into a class and supply a logger handle
    class OrderService(Loggeable):
        _log = get_logger(__name__)

        def get_logger(self):
            return self._log

        def place(self, order_id):
            # 3. Pass the signature on each call...
            self.info("place(order_id)", "placing order {}", order_id)

            # ...or bind it once and chain
            log = self.with_signature("place(order_id)")
            log.start("order_id={}", order_id).debug("reserved").end()

        # 4. Or let @signed derive the signature and log Start/End for you
        @signed
        def cancel(self, order_id):
            ...

Exported names:
    Loggeable:        Mixin providing trace/debug/info/warn/error/start/end/log.
    BoundContext:     A signature bound once; returned by with_signature().
    Level:            The five supported severities.
    TRACE_LEVEL:      The ``logging`` number registered for TRACE (5).
    SignatureLogger:  Protocol for the handle returned by get_logger().
    StdlibLogger:     SignatureLogger backed by a ``logging.Logger``.
    get_logger:       Convenience constructor for StdlibLogger.
    signed:           Decorator adding Start/End/error records to a method.
    format_template:  The ``{}`` placeholder substitution routine.
    TemplateMessage:  Lazily formatted message object handed to ``logging``.
"""

from .levels import Level, TRACE_LEVEL
from .template import TemplateMessage, format_template
from .adapter import SignatureLogger, StdlibLogger, get_logger
from .context import BoundContext
from .core import Loggeable
from .instrument import signed

__all__ = [
    "Loggeable",
    "BoundContext",
    "Level",
    "TRACE_LEVEL",
    "SignatureLogger",
    "StdlibLogger",
    "get_logger",
    "signed",
    "format_template",
    "TemplateMessage",
]
__version__ = "0.1.0"
