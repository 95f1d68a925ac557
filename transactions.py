"""Order log: the durable, append-only record of completed checkouts.

Each order is written as a text block::

    [LOG] -> Order ID: <id> has been successfully checked out and paid using <method>.
    <product id>\\t<name>\\t<price>\\t<quantity>
    Total Amount: $<total>
    <blank line>

Tab is the only field separator inside item lines. Prices and totals are
written with repr() so they read back as the same float.
"""

import os
import re
import time

import structlog

from errors import NoOrdersError, OrderLogWriteError
from models import CartItem, Order, Product

logger = structlog.get_logger()

HEADER_PREFIX = "[LOG] -> Order ID: "
TOTAL_PREFIX = "Total Amount: $"

_HEADER_RE = re.compile(
    r"^\[LOG\] -> Order ID: (?P<order_id>.+?) has been successfully checked out "
    r"and paid using (?P<method>.+)\.$"
)


def format_order(order):
    lines = [
        f"{HEADER_PREFIX}{order.order_id} has been successfully checked out "
        f"and paid using {order.payment_method}."
    ]
    for item in order.items:
        p = item.product
        lines.append(f"{p.id}\t{p.name}\t{p.price!r}\t{item.qty}")
    lines.append(f"{TOTAL_PREFIX}{order.total!r}")
    return "\n".join(lines) + "\n\n"


def _parse_item(line):
    fields = line.split("\t")
    if len(fields) != 4:
        return None
    try:
        product = Product(int(fields[0]), fields[1], float(fields[2]))
        qty = int(fields[3])
    except ValueError:
        return None
    return CartItem(product, qty)


def parse_orders(lines):
    """Rebuild orders from order log lines.

    Reading is best effort: item lines that do not parse are skipped, and
    a block without a total line gets the sum of its items as total.
    """
    orders = []
    current = None

    def close_block():
        order_id, method, items, total = current
        if total is None:
            total = sum(i.total for i in items)
        orders.append(Order(order_id, method, items, total))

    for raw in lines:
        line = raw.rstrip("\r\n")
        match = _HEADER_RE.match(line)
        if match:
            if current is not None:
                close_block()
            current = [match.group("order_id"), match.group("method"), [], None]
            continue
        if current is None:
            continue
        if not line.strip():
            close_block()
            current = None
        elif line.startswith(TOTAL_PREFIX):
            try:
                current[3] = float(line[len(TOTAL_PREFIX):].replace(",", ""))
            except ValueError:
                logger.warning("order_total_unreadable", order_id=current[0], line=line)
        else:
            item = _parse_item(line)
            if item is None:
                logger.warning("order_line_skipped", order_id=current[0], line=line)
            else:
                current[2].append(item)

    if current is not None:
        close_block()
    return orders


def append_with_retry(write, retries=3, initial_delay=0.1):
    """Call ``write()``, retrying on OSError with exponential backoff.

    Delays are initial_delay * 2**attempt. The last OSError is re-raised
    once retries are exhausted.
    """
    last_exc = None
    for attempt in range(retries):
        try:
            return write()
        except OSError as e:
            last_exc = e
            logger.warning("order_log_write_failed", attempt=attempt + 1, error=str(e))
            if attempt + 1 < retries:
                time.sleep(initial_delay * (2 ** attempt))
    raise last_exc


class FileOrderLog:
    """Order log kept in a text file and re-read on every view."""

    def __init__(self, path, retries=3, initial_delay=0.1):
        self.path = str(path)
        self.retries = retries
        self.initial_delay = initial_delay

    def _write_block(self, block, offset):
        # offset is the file size before this order; a failed attempt must
        # not leave any of its bytes past it
        data = memoryview(block.encode("utf-8"))
        with open(self.path, "ab", buffering=0) as fh:
            if fh.tell() > offset:
                fh.truncate(offset)
            try:
                while data:
                    data = data[fh.write(data):]
                os.fsync(fh.fileno())
            except OSError:
                fh.truncate(offset)
                raise

    def append(self, order):
        block = format_order(order)
        offset = os.path.getsize(self.path) if os.path.exists(self.path) else 0
        try:
            append_with_retry(lambda: self._write_block(block, offset), self.retries, self.initial_delay)
        except OSError as e:
            logger.error("order_log_append_failed", order_id=order.order_id, path=self.path, error=str(e))
            raise OrderLogWriteError(f"Order {order.order_id} could not be recorded: {e}") from e
        logger.info("order_appended", order_id=order.order_id, path=self.path)

    def orders(self):
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as fh:
            return parse_orders(fh)

    def view(self):
        orders = self.orders()
        if not orders:
            raise NoOrdersError()
        return orders


class MemoryOrderLog:
    """Order log held in memory for the lifetime of the process."""

    def __init__(self):
        self._orders = []

    def append(self, order):
        self._orders.append(order)
        logger.info("order_appended", order_id=order.order_id, path=None)

    def orders(self):
        return list(self._orders)

    def view(self):
        if not self._orders:
            raise NoOrdersError()
        return list(self._orders)
