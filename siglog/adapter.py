"""adapter.py - The logger collaborator that SigLog writes records to.

``Loggeable`` never builds or configures loggers itself. It asks its
implementer for a handle via ``get_logger()`` and calls one of five leveled
emit methods on it, each taking a ``{}`` template and positional arguments.
Any object with that shape satisfies ``SignatureLogger``.

``StdlibLogger`` is the implementation used in practice. It follows the
delegation pattern: it wraps an existing ``logging.Logger`` and forwards each
call as a record at the matching level, so the application's handlers,
formatters and level configuration apply unchanged.

Typical usage::

    import logging
    from siglog import Loggeable, get_logger

    logging.basicConfig(level=logging.DEBUG)

    class OrderService(Loggeable):
        _log = get_logger(__name__)

        def get_logger(self):
            return self._log
"""

import logging
import os
import sys
from typing import Any, Optional, Protocol, Union, runtime_checkable

from .levels import Level
from .template import TemplateMessage

ExcInfo = Union[BaseException, bool, None]

_PACKAGE_DIR = os.path.dirname(os.path.normcase(__file__))


def _find_caller():
    """Return (filename, lineno, funcName) of the nearest frame outside siglog."""
    f = sys._getframe(1)
    while f is not None:
        filename = f.f_code.co_filename
        if os.path.dirname(os.path.normcase(filename)) != _PACKAGE_DIR:
            return filename, f.f_lineno, f.f_code.co_name
        f = f.f_back
    return "(unknown file)", 0, "(unknown function)"


@runtime_checkable
class SignatureLogger(Protocol):
    """Structural protocol for the logger handle returned by ``get_logger()``.

    Each method receives a template containing ``{}`` placeholders followed
    by the substitution arguments. ``error`` additionally accepts an attached
    exception through ``exc_info`` so that it is never mistaken for a
    substitution argument.
    """

    def trace(self, template: str, *args: Any) -> None: ...

    def debug(self, template: str, *args: Any) -> None: ...

    def info(self, template: str, *args: Any) -> None: ...

    def warn(self, template: str, *args: Any) -> None: ...

    def error(self, template: str, *args: Any, exc_info: ExcInfo = None) -> None: ...


class StdlibLogger:
    """``SignatureLogger`` backed by a standard ``logging.Logger``.

    Records are created with a ``TemplateMessage`` as their ``msg`` so that
    ``{}`` substitution happens lazily, when a handler formats the record.

    Attributes:
        logger (logging.Logger): The wrapped standard library logger.

    Example:
        >>> log = StdlibLogger("orders")
        >>> log.info("::{}: placed {}", "place(id)", 42)
    """

    def __init__(self, logger: Union[logging.Logger, str, None] = None) -> None:
        """Wrap ``logger``.

        Args:
            logger: A ``logging.Logger``, or a name passed to
                ``logging.getLogger``. ``None`` selects the root logger.
        """
        if not isinstance(logger, logging.Logger):
            logger = logging.getLogger(logger)
        self.logger = logger

    def trace(self, template: str, *args: Any) -> None:
        """Log at TRACE level."""
        self._emit(Level.TRACE, template, args)

    def debug(self, template: str, *args: Any) -> None:
        """Log at DEBUG level."""
        self._emit(Level.DEBUG, template, args)

    def info(self, template: str, *args: Any) -> None:
        """Log at INFO level."""
        self._emit(Level.INFO, template, args)

    def warn(self, template: str, *args: Any) -> None:
        """Log at WARN level (``logging.WARNING``)."""
        self._emit(Level.WARN, template, args)

    def error(self, template: str, *args: Any, exc_info: ExcInfo = None) -> None:
        """Log at ERROR level, optionally attaching an exception.

        Args:
            template: Message template with ``{}`` placeholders.
            *args: Substitution arguments.
            exc_info: An exception instance to attach to the record, ``True``
                to attach the exception currently being handled, or ``None``.
        """
        self._emit(Level.ERROR, template, args, exc_info=exc_info)

    def is_enabled_for(self, level: Level) -> bool:
        """Return True if a record at ``level`` would be processed."""
        return self.logger.isEnabledFor(level)

    def _emit(
        self,
        level: Level,
        template: str,
        args: tuple,
        exc_info: ExcInfo = None,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        # Build the record directly so it is attributed to the first frame
        # outside this package, whatever the entry point's depth.
        fn, lno, func = _find_caller()
        if isinstance(exc_info, BaseException):
            exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
        elif exc_info and not isinstance(exc_info, tuple):
            exc_info = sys.exc_info()
        record = self.logger.makeRecord(
            self.logger.name,
            int(level),
            fn,
            lno,
            TemplateMessage(template, args),
            (),
            exc_info or None,
            func,
        )
        self.logger.handle(record)

    def __repr__(self) -> str:  # pragma: no cover
        return f"StdlibLogger({self.logger.name!r})"


def get_logger(name: Optional[str] = None) -> StdlibLogger:
    """Return a ``StdlibLogger`` wrapping ``logging.getLogger(name)``.

    Args:
        name: Dotted logger name, usually ``__name__``. ``None`` selects the
            root logger.

    Returns:
        A new ``StdlibLogger``. Wrappers are cheap; the underlying
        ``logging.Logger`` is the shared, cached instance.
    """
    return StdlibLogger(logging.getLogger(name))
