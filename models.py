import copy

from errors import EmptyCartError, InvalidQuantityError


#product model
class Product:
    __slots__ = ("_id", "_name", "_price")

    def __init__(self, id, name, price):
        self._id = int(id)
        self._name = str(name)
        self._price = float(price)

    @property
    def id(self):
        return self._id

    @property
    def name(self):
        return self._name

    @property
    def price(self):
        return self._price

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return (self.id, self.name, self.price) == (other.id, other.name, other.price)

    def __hash__(self):
        return hash((self.id, self.name, self.price))

    def __repr__(self):
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"


#cart item model
class CartItem:
    def __init__(self, product, qty):
        self.product = product
        self.qty = qty

    @property
    def total(self):
        return self.product.price * self.qty

    def __eq__(self, other):
        if not isinstance(other, CartItem):
            return NotImplemented
        return self.product == other.product and self.qty == other.qty

    def __repr__(self):
        return f"CartItem(product={self.product!r}, qty={self.qty!r})"


#cart model
class Cart:
    """Products chosen during one session, in the order they were first added.

    Holds at most one CartItem per product id; adding a product that is
    already present raises that item's quantity instead.
    """

    def __init__(self):
        self.items = []

    def add(self, product, qty=1):
        if qty <= 0:
            raise InvalidQuantityError()

        for item in self.items:
            if item.product.id == product.id:
                item.qty += qty
                return

        self.items.append(CartItem(copy.copy(product), qty))

    def is_empty(self):
        return len(self.items) == 0

    def snapshot(self):
        """Deep copy of the current items, safe to keep after clear()."""
        return tuple(copy.deepcopy(self.items))

    def clear(self):
        self.items = []

    @property
    def total(self):
        if self.is_empty():
            raise EmptyCartError()
        return sum(item.total for item in self.items)

    def __len__(self):
        return len(self.items)


#order model
class Order:
    """A completed checkout. Never changes once created."""

    __slots__ = ("_order_id", "_payment_method", "_items", "_total")

    def __init__(self, order_id, payment_method, items, total):
        self._order_id = str(order_id)
        self._payment_method = str(payment_method)
        self._items = tuple(copy.deepcopy(list(items)))
        self._total = float(total)

    @property
    def order_id(self):
        return self._order_id

    @property
    def payment_method(self):
        return self._payment_method

    @property
    def items(self):
        return copy.deepcopy(self._items)

    @property
    def total(self):
        return self._total

    def __eq__(self, other):
        if not isinstance(other, Order):
            return NotImplemented
        return (
            self.order_id == other.order_id
            and self.payment_method == other.payment_method
            and self._items == other._items
            and self.total == other.total
        )

    def __repr__(self):
        return (
            f"Order(order_id={self.order_id!r}, payment_method={self.payment_method!r}, "
            f"items={list(self._items)!r}, total={self.total!r})"
        )
