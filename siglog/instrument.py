"""instrument.py - Optional @signed decorator for Loggeable methods.

``@signed`` derives a signature from the decorated method and its arguments
and brackets each call with TRACE ``Start``/``End`` records, logging any
unhandled exception at ERROR before re-raising it::

    class Warehouse(Loggeable):
        def get_logger(self):
            return self._log

        @signed(show_result=True)
        def place(self, item_id, qty=1):
            ...

    Warehouse().place(42)
    # TRACE ::Warehouse.place(item_id=42, qty=1): Start
    # TRACE ::Warehouse.place(item_id=42, qty=1): End - returned <result>

The decorated callable must be a method whose first argument is the
``Loggeable`` instance. When the handle reports TRACE as disabled through an
``is_enabled_for`` method, Start/End are skipped and the signature is only
built if the call fails.
"""

import inspect
from functools import wraps
from typing import Any, Callable, Optional

from .context import FAILED, BoundContext
from .levels import Level
from .template import FAILED_TO_STRING

RETURNED = "returned {}"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return FAILED_TO_STRING


def _signature_of(func: Callable, args: tuple, kwargs: dict, show_args: bool) -> str:
    if not show_args:
        return f"{func.__qualname__}()"

    # Bind by name so positional calls still show parameter names. Fall back
    # to "..." for callables inspect cannot handle or arguments that do not
    # bind; the call itself then reports the real error.
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
        bound.apply_defaults()
    except Exception:
        return f"{func.__qualname__}(...)"
    params = list(bound.arguments.items())[1:]  # drop self
    arg_str = ", ".join(f"{k}={_safe_repr(v)}" for k, v in params)
    return f"{func.__qualname__}({arg_str})"


def _trace_enabled(handle: Any) -> bool:
    # Handles without is_enabled_for are treated as always enabled.
    is_enabled_for = getattr(handle, "is_enabled_for", None)
    return is_enabled_for is None or is_enabled_for(Level.TRACE)


def signed(
    func: Optional[Callable] = None,
    *,
    show_args: bool = True,
    show_result: bool = False,
) -> Callable:
    """Decorator that logs Start/End/error around a ``Loggeable`` method.

    Usable bare (``@signed``) or with options (``@signed(show_result=True)``).

    Args:
        func: The method to wrap. Supplied automatically when the decorator
            is used without parentheses.
        show_args: If True (default), the signature lists the bound argument
            values as ``name=repr(value)``. If False it is just
            ``Qualname()``.
        show_result: If True, the End record reads ``End - returned {}``
            with the return value substituted.

    Returns:
        The wrapped method, with name and docstring preserved via
        ``functools.wraps``.

    Raises:
        Any exception raised by the method is re-raised unchanged after being
        logged at ERROR with the exception attached.
    """

    def decorate(fn: Callable) -> Callable:
        @wraps(fn)
        def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            def bind() -> BoundContext:
                return self.with_signature(
                    _signature_of(fn, (self, *args), kwargs, show_args)
                )

            # The signature is only built when a record will be written.
            log = bind() if _trace_enabled(self.get_logger()) else None
            if log is not None:
                log.start()
            try:
                result = fn(self, *args, **kwargs)
            except Exception as exc:
                (log if log is not None else bind()).error(exc, FAILED)
                raise
            if log is not None:
                if show_result:
                    log.end(RETURNED, result)
                else:
                    log.end()
            return result

        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
