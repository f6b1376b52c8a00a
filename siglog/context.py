"""context.py - A signature bound once and reused across log calls.

``BoundContext`` pairs a ``Loggeable`` with one fixed signature and offers the
same logging methods minus the signature argument. Every method forwards to
the facade with the stored signature injected, so a bound call produces
exactly the record the equivalent direct call would.

Every logging method returns the context itself, which allows chaining::

    log = service.with_signature("place(id)")
    log.start("placing id={}", 42).info("done").end()

A context can also bracket a block of work. ``Start`` is logged on entry and
``End`` on normal exit; if the block raises an ``Exception``, it is logged at
ERROR and propagates unchanged. Other ``BaseException``s such as
``KeyboardInterrupt`` propagate without a record, as with ``@signed``::

    with service.with_signature("place(id)") as log:
        log.debug("reserving stock")

Contexts are immutable and hold no other state, so one instance may be
shared freely between threads.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:  # pragma: no cover
    from .core import Loggeable
    from .levels import Level

FAILED = "Failed"


@dataclass(frozen=True)
class BoundContext:
    """Immutable ``(facade, signature)`` pair forwarding log calls.

    Attributes:
        facade (Loggeable): The object whose logging methods are called. Not
            owned by the context.
        signature: The label injected as the first argument of every call.

    Example:
        >>> log = service.with_signature("place(id)")  # doctest: +SKIP
        >>> log.start("placing id={}", 42).info("done").end()  # doctest: +SKIP
    """

    facade: "Loggeable"
    signature: Any

    def trace(self, message: str, *args: Any) -> "BoundContext":
        self.facade.trace(self.signature, message, *args)
        return self

    def debug(self, message: str, *args: Any) -> "BoundContext":
        self.facade.debug(self.signature, message, *args)
        return self

    def info(self, message: str, *args: Any) -> "BoundContext":
        self.facade.info(self.signature, message, *args)
        return self

    def warn(self, message: str, *args: Any) -> "BoundContext":
        self.facade.warn(self.signature, message, *args)
        return self

    def error(self, message: Union[str, BaseException], *args: Any) -> "BoundContext":
        """Log at ERROR level.

        Accepts the same three forms as ``Loggeable.error`` minus the
        signature: ``(template, *args)``, ``(template, exc, *args)`` and
        ``(exc, template, *args)``.
        """
        self.facade.error(self.signature, message, *args)
        return self

    def start(self, message: Optional[str] = None, *args: Any) -> "BoundContext":
        self.facade.start(self.signature, message, *args)
        return self

    def end(self, message: Optional[str] = None, *args: Any) -> "BoundContext":
        self.facade.end(self.signature, message, *args)
        return self

    def log(
        self,
        level: Union["Level", str, int],
        message: str,
        *args: Any,
    ) -> "BoundContext":
        self.facade.log(level, self.signature, message, *args)
        return self

    # ---------------------------------------------------------------------- #
    # Context manager protocol
    # ---------------------------------------------------------------------- #

    def __enter__(self) -> "BoundContext":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.end()
        elif issubclass(exc_type, Exception):
            self.error(exc_val, FAILED)
        return False
