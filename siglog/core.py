"""core.py - The ``Loggeable`` mixin: signature-prefixed leveled logging.

A class that mixes in ``Loggeable`` and supplies a logger through
``get_logger()`` gains ``trace``/``debug``/``info``/``warn``/``error`` methods
that take a *signature* label as their first argument. The signature is
always substituted into the first placeholder of the emitted template::

    self.info("place(id)", "placed id={}", 42)
    # template: "::{}: placed id={}"   args: ("place(id)", 42)
    # rendered: "::place(id): placed id=42"

To avoid repeating the signature, bind it once with ``with_signature()``::

    log = self.with_signature("place(id)")
    log.start("placing id={}", 42).info("done").end()

Every call is a synchronous pass-through to the logger handle. ``Loggeable``
holds no state, adds no locking and never catches errors raised by the
handle.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Union

from .adapter import SignatureLogger
from .context import BoundContext
from .levels import Level

SIGNATURE_PREFIX = "::{}: "
START = "Start"
END = "End"
MARKER_SEPARATOR = " - "

# Level -> name of the emit method on the logger handle.
_EMITTERS = {
    Level.TRACE: "trace",
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warn",
    Level.ERROR: "error",
}


def _marked(marker: str, message: Optional[str]) -> str:
    if message is None:
        return marker
    return f"{marker}{MARKER_SEPARATOR}{message}"


def _prefixed(message: str) -> str:
    return f"{SIGNATURE_PREFIX}{message}"


class Loggeable(ABC):
    """Mixin providing signature-prefixed logging over a supplied logger.

    Implementers provide exactly one method, ``get_logger()``. Everything
    else is implemented here in terms of it.

    Example:
        >>> from siglog import Loggeable, get_logger
        >>> class Warehouse(Loggeable):
        ...     def get_logger(self):
        ...         return get_logger("warehouse")
        ...
        ...     def place(self, item_id):
        ...         log = self.with_signature("place(item_id)")
        ...         log.start("placing item_id={}", item_id)
        ...         log.end()
    """

    @abstractmethod
    def get_logger(self) -> SignatureLogger:
        """Return the logger handle that records are written to."""

    # ---------------------------------------------------------------------- #
    # Signature binding
    # ---------------------------------------------------------------------- #

    def with_signature(self, signature: Any) -> BoundContext:
        """Bind ``signature`` for a sequence of log calls.

        Args:
            signature: Label identifying the call site, e.g. ``"place(id)"``.

        Returns:
            A new ``BoundContext`` that forwards to this object.
        """
        return BoundContext(self, signature)

    # ---------------------------------------------------------------------- #
    # Leveled logging
    # ---------------------------------------------------------------------- #

    def trace(self, signature: Any, message: str, *args: Any) -> None:
        self.log(Level.TRACE, signature, message, *args)

    def debug(self, signature: Any, message: str, *args: Any) -> None:
        self.log(Level.DEBUG, signature, message, *args)

    def info(self, signature: Any, message: str, *args: Any) -> None:
        self.log(Level.INFO, signature, message, *args)

    def warn(self, signature: Any, message: str, *args: Any) -> None:
        self.log(Level.WARN, signature, message, *args)

    def error(
        self,
        signature: Any,
        message: Union[str, BaseException],
        *args: Any,
    ) -> None:
        """Log at ERROR level, optionally attaching an exception.

        Three call forms are accepted::

            error(signature, template, *args)
            error(signature, template, exc, *args)
            error(signature, exc, template, *args)

        The last two are equivalent: both attach ``exc`` to the record and
        substitute ``args`` into ``template``. An exception is recognised
        only in the position right after the signature or right after the
        template; anywhere else it is an ordinary substitution argument.

        Exception-carrying calls go straight to the handle's ``error`` with
        ``exc_info`` rather than through ``log()``.

        Raises:
            TypeError: If an exception is given first without a template.
        """
        if isinstance(message, BaseException):
            if not args:
                raise TypeError("error() missing message template after exception")
            self._error_with_exception(signature, args[0], message, args[1:])
        elif args and isinstance(args[0], BaseException):
            self._error_with_exception(signature, message, args[0], args[1:])
        else:
            self.log(Level.ERROR, signature, message, *args)

    def start(self, signature: Any, message: Optional[str] = None, *args: Any) -> None:
        """Log a TRACE ``Start`` marker, or ``Start - <message>``."""
        self.trace(signature, _marked(START, message), *args)

    def end(self, signature: Any, message: Optional[str] = None, *args: Any) -> None:
        """Log a TRACE ``End`` marker, or ``End - <message>``."""
        self.trace(signature, _marked(END, message), *args)

    def log(
        self,
        level: Union[Level, str, int],
        signature: Any,
        message: str,
        *args: Any,
    ) -> None:
        """Emit one record at ``level``. All non-exception calls end up here.

        Args:
            level: One of the five supported levels, or anything
                ``Level.parse`` accepts.
            signature: Label substituted into the leading ``::{}:`` slot.
            message: Caller template with ``{}`` placeholders.
            *args: Substitution arguments for ``message``.

        Raises:
            ValueError: If ``level`` is not one of the five supported levels.
        """
        emit = getattr(self.get_logger(), _EMITTERS[Level.parse(level)])
        emit(_prefixed(message), *self.combine_args(signature, *args))

    def combine_args(self, first: Any, *rest: Any) -> Tuple[Any, ...]:
        """Return ``(first, *rest)``: the signature followed by caller args."""
        return (first, *rest)

    # ---------------------------------------------------------------------- #
    # Private helpers
    # ---------------------------------------------------------------------- #

    def _error_with_exception(
        self,
        signature: Any,
        message: str,
        exc: BaseException,
        args: Tuple[Any, ...],
    ) -> None:
        self.get_logger().error(
            _prefixed(message),
            *self.combine_args(signature, *args),
            exc_info=exc,
        )
