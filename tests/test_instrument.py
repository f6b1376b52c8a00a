"""test_instrument.py - Unit tests for the @signed decorator.

Covers:
    - Start and End are logged at TRACE around the call
    - Signature uses __qualname__ and bound arguments, defaults included
    - show_args=False gives a bare 'Qualname()' signature
    - show_result=True logs 'End - returned {}' with the return value
    - Exceptions are logged at ERROR with the exception attached and re-raised
    - Metadata is preserved via functools.wraps
    - A failing __repr__ is rendered instead of breaking the call
    - BaseExceptions other than Exception propagate without an ERROR record
    - The signature is not built when TRACE is disabled on the handle
"""

import logging

import pytest

from siglog import TRACE_LEVEL, Loggeable, get_logger, signed
from siglog.template import FAILED_TO_STRING


class Warehouse(Loggeable):
    def __init__(self, logger):
        self._logger = logger

    def get_logger(self):
        return self._logger

    @signed
    def place(self, item_id, qty=1):
        """Place an order."""
        return item_id * qty

    @signed(show_args=False)
    def audit(self, secret):
        return "ok"

    @signed(show_result=True)
    def count(self):
        return 7

    @signed
    def explode(self, reason):
        raise RuntimeError(reason)

    @signed
    def work(self, thing):
        return "done"

    @signed
    def interrupt(self):
        raise KeyboardInterrupt


class TestSignedStartEnd:
    def test_logs_start_and_end_around_call(self, recorder):
        svc = Warehouse(recorder)
        assert svc.place(3, qty=2) == 6

        sig = "Warehouse.place(item_id=3, qty=2)"
        assert recorder.calls == [
            ("trace", "::{}: Start", (sig,), None),
            ("trace", "::{}: End", (sig,), None),
        ]

    def test_signature_includes_defaults(self, recorder):
        Warehouse(recorder).place(5)
        assert recorder.calls[0].args == ("Warehouse.place(item_id=5, qty=1)",)

    def test_arguments_use_repr(self, recorder):
        Warehouse(recorder).place("a")
        assert recorder.calls[0].args == ("Warehouse.place(item_id='a', qty=1)",)

    def test_show_args_false_hides_arguments(self, recorder):
        Warehouse(recorder).audit("hunter2")
        assert all(c.args == ("Warehouse.audit()",) for c in recorder.calls)

    def test_show_result_logs_return_value(self, recorder):
        assert Warehouse(recorder).count() == 7
        assert recorder.calls[-1] == (
            "trace",
            "::{}: End - returned {}",
            ("Warehouse.count()", 7),
            None,
        )


class TestSignedExceptions:
    def test_exception_logged_and_reraised(self, recorder):
        svc = Warehouse(recorder)
        with pytest.raises(RuntimeError, match="kaboom"):
            svc.explode("kaboom")

        start, failure = recorder.calls
        assert start.template == "::{}: Start"
        assert failure.method == "error"
        assert failure.template == "::{}: Failed"
        assert failure.args == ("Warehouse.explode(reason='kaboom')",)
        assert isinstance(failure.exc_info, RuntimeError)

    def test_no_end_record_after_exception(self, recorder):
        svc = Warehouse(recorder)
        with pytest.raises(RuntimeError):
            svc.explode("x")
        assert not any("End" in c.template for c in recorder.calls)

    def test_unbindable_arguments_render_as_ellipsis(self, recorder):
        svc = Warehouse(recorder)
        with pytest.raises(TypeError):
            svc.place(1, 2, 3)
        assert recorder.calls[0].args == ("Warehouse.place(...)",)


class TestSignedMetadata:
    def test_wraps_preserves_name_and_doc(self, recorder):
        svc = Warehouse(recorder)
        assert svc.place.__name__ == "place"
        assert svc.place.__doc__ == "Place an order."


# ---------------------------------------------------------------------------
# Robustness
# ---------------------------------------------------------------------------


class _HalfBuilt:
    def __repr__(self):
        raise AttributeError("half-initialised")


class _CountingRepr:
    def __init__(self):
        self.calls = 0

    def __repr__(self):
        self.calls += 1
        return "counted"


class TestSignedRobustness:
    def test_failing_repr_does_not_break_the_call(self, recorder):
        """An argument whose __repr__ raises is rendered, not propagated."""
        assert Warehouse(recorder).work(_HalfBuilt()) == "done"
        assert recorder.calls[0].args == (f"Warehouse.work(thing={FAILED_TO_STRING})",)

    def test_base_exceptions_propagate_without_error_record(self, recorder):
        """Only Exception subclasses are logged, matching the with-block form."""
        with pytest.raises(KeyboardInterrupt):
            Warehouse(recorder).interrupt()
        assert [c.template for c in recorder.calls] == ["::{}: Start"]


class TestSignedLevelCheck:
    LOGGER_NAME = "siglog.tests.instrument"

    def test_signature_not_built_when_trace_disabled(self, caplog):
        caplog.set_level(logging.INFO, logger=self.LOGGER_NAME)
        thing = _CountingRepr()

        assert Warehouse(get_logger(self.LOGGER_NAME)).work(thing) == "done"
        assert thing.calls == 0
        assert caplog.records == []

    def test_failure_still_logged_when_trace_disabled(self, caplog):
        caplog.set_level(logging.INFO, logger=self.LOGGER_NAME)

        with pytest.raises(RuntimeError):
            Warehouse(get_logger(self.LOGGER_NAME)).explode("late")

        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "::Warehouse.explode(reason='late'): Failed"
        assert isinstance(record.exc_info[1], RuntimeError)

    def test_start_and_end_logged_when_trace_enabled(self, caplog):
        caplog.set_level(TRACE_LEVEL, logger=self.LOGGER_NAME)
        thing = _CountingRepr()

        Warehouse(get_logger(self.LOGGER_NAME)).work(thing)
        assert [r.getMessage() for r in caplog.records] == [
            "::Warehouse.work(thing=counted): Start",
            "::Warehouse.work(thing=counted): End",
        ]
        assert thing.calls == 1
