"""examples/multithreaded_usage.py - One facade shared by several threads.

SigLog adds no locking of its own. Each call is a synchronous pass-through to
the standard logging machinery, whose handlers serialise emit() internally,
so a single Loggeable and even a single BoundContext can be used from any
number of threads.

Run:
    python examples/multithreaded_usage.py
"""

import logging
import threading
import time

from siglog import TRACE_LEVEL, Loggeable, get_logger, signed

logging.basicConfig(
    level=TRACE_LEVEL,
    format="%(asctime)s [%(levelname)s] [thread=%(threadName)s] %(message)s",
)


class OrderService(Loggeable):
    _log = get_logger("order_service")

    def get_logger(self):
        return self._log

    @signed
    def fetch_inventory(self, product_id: int) -> int:
        time.sleep(0.01)  # simulate DB latency
        stock = {1: 10, 2: 0, 3: 5}  # product 2 is out-of-stock
        return stock.get(product_id, 0)

    @signed
    def place_order(self, order_id: int, product_id: int, qty: int) -> dict:
        stock = self.fetch_inventory(product_id)
        if stock < qty:
            raise ValueError(f"OutOfStock: product_id={product_id}")
        return {"order_id": order_id, "status": "confirmed"}


def worker(service: OrderService, order_id: int, product_id: int, qty: int) -> None:
    try:
        service.place_order(order_id, product_id, qty)
    except ValueError:
        pass


if __name__ == "__main__":
    service = OrderService()
    heartbeat = service.with_signature("main()")

    threads = [
        threading.Thread(target=worker, args=(service, 1001, 1, 2), name="Thread-A"),
        threading.Thread(target=worker, args=(service, 1002, 2, 1), name="Thread-B"),
        threading.Thread(target=worker, args=(service, 1003, 3, 3), name="Thread-C"),
    ]

    heartbeat.start("dispatching {} orders", len(threads))
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    heartbeat.end()
