"""examples/basic_usage.py - SigLog integration demo.

Demonstrates the three ways of attaching a signature:
    Scenario A: pass the signature on every call
    Scenario B: bind it once with with_signature() and chain
    Scenario C: let @signed derive it from the method and its arguments

Run:
    python examples/basic_usage.py
"""

import logging

from siglog import TRACE_LEVEL, Loggeable, get_logger, signed

# ---------------------------------------------------------------------------
# Standard logger setup; TRACE sits below DEBUG so enable it explicitly
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=TRACE_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


class PaymentService(Loggeable):
    _log = get_logger("payments")

    def get_logger(self):
        return self._log

    # Scenario A
    def balance(self, user_id: int) -> int:
        self.debug("balance(user_id)", "querying balance for user_id={}", user_id)
        return 3_000

    # Scenario B
    def pay(self, user_id: int, amount: int) -> None:
        log = self.with_signature("pay(user_id, amount)")
        log.start("user_id={} amount={}", user_id, amount)

        balance = self.balance(user_id)
        if balance < amount:
            exc = ValueError(f"InsufficientFunds: balance={balance}, amount={amount}")
            log.error("payment rejected for user_id={}", exc, user_id)
            raise exc

        log.info("payment accepted").end()

    # Scenario C
    @signed(show_result=True)
    def refund(self, user_id: int, amount: int) -> int:
        with self.with_signature("refund.ledger()") as log:
            log.debug("crediting {}", amount)
        return amount


if __name__ == "__main__":
    service = PaymentService()
    service.pay(user_id=101, amount=500)
    try:
        service.pay(user_id=101, amount=5_000)
    except ValueError:
        pass
    service.refund(user_id=101, amount=250)
