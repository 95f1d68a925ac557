import time

import structlog

from errors import EmptyCartError
from models import Cart, Order

logger = structlog.get_logger()


#Cart service
class CartService:
    def __init__(self, catalog, cart=None):
        self.catalog = catalog
        self.cart = cart if cart is not None else Cart()

    def add_to_cart(self, product_id, qty=1):
        product = self.catalog.get_product(product_id)
        self.cart.add(product, qty)
        logger.debug("cart_item_added", product_id=product.id, qty=qty)
        return product

    def is_empty(self):
        return self.cart.is_empty()

    def get_items(self):
        return list(self.cart.items)

    def get_total(self):
        return self.cart.total


#Order ids
class CounterOrderIds:
    """Order ids 1, 2, 3, ... for this run."""

    def __init__(self, start=1):
        self._next = start

    @classmethod
    def after(cls, orders):
        """Continue numbering after the highest numeric id in ``orders``."""
        highest = 0
        for order in orders:
            if order.order_id.isdigit():
                highest = max(highest, int(order.order_id))
        return cls(highest + 1)

    def next_id(self):
        order_id = str(self._next)
        self._next += 1
        return order_id


class TimestampOrderIds:
    """``ORD<unix seconds>`` ids. Two checkouts in the same second share an id."""

    def __init__(self, clock=time.time):
        self._clock = clock

    def next_id(self):
        return f"ORD{int(self._clock())}"


#Check-out service
class CheckoutService:
    def __init__(self, order_log, order_ids=None, receipts=None):
        self.order_log = order_log
        self.order_ids = order_ids if order_ids is not None else CounterOrderIds()
        self.receipts = receipts

    def checkout(self, cart, method):
        """Turn a non-empty cart into a recorded order and empty the cart.

        Raises EmptyCartError for an empty cart and OrderLogWriteError when
        the order cannot be recorded. In both cases the cart is left as is.
        """
        if cart.is_empty():
            raise EmptyCartError()

        total = cart.total
        method.settle(total)

        order = Order(self.order_ids.next_id(), method.display_name, cart.snapshot(), total)

        # must be durable before the cart is cleared
        self.order_log.append(order)
        cart.clear()

        logger.info(
            "checkout_completed",
            order_id=order.order_id,
            payment_method=order.payment_method,
            total=order.total,
        )

        if self.receipts is not None:
            try:
                path = self.receipts.generate(order)
                logger.info("receipt_generated", order_id=order.order_id, path=path)
            except Exception as e:
                # the order is already recorded; a missing receipt only gets logged
                logger.error("receipt_failed", order_id=order.order_id, error=str(e))

        return order
