import sys

from payments import PaymentMethod

RULE = "-" * 62

MENU_ITEMS = [
    "View Products",
    "View Shopping Cart",
    "View Orders",
    "Exit",
]


class ConsoleView:
    """Writes every screen of the store to text streams."""

    def __init__(self, out=None, err=None):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def _print(self, text=""):
        print(text, file=self.out)

    def prompt(self, text):
        self.out.write(text)
        self.out.flush()

    def info(self, message):
        self._print(message)

    def error(self, message):
        print(f"Error: {message}", file=self.err)

    # --- SCREENS ---

    def show_menu(self):
        self._print()
        self._print("===== Online Store Menu =====")
        for i, label in enumerate(MENU_ITEMS, start=1):
            self._print(f"{i}. {label}")

    def show_products(self, products):
        self._print()
        self._print("Available Products:")
        self._print(RULE)
        self._print(f"{'ID':<8}{'Name':<20}{'Price':>10}")
        self._print(RULE)
        for p in products:
            self._print(f"{p.id:<8}{p.name:<20}{'$' + format(p.price, ',.2f'):>10}")
        self._print(RULE)

    def show_cart(self, items):
        if not items:
            self._print("Your shopping cart is empty.")
            return

        self._print()
        self._print("Shopping Cart:")
        self._print(RULE)
        self._print(f"{'ID':<8}{'Name':<20}{'Price':>10}{'Qty':>8}{'Total':>12}")
        self._print(RULE)
        total = 0.0
        for item in items:
            p = item.product
            total += item.total
            self._print(
                f"{p.id:<8}{p.name:<20}{'$' + format(p.price, ',.2f'):>10}"
                f"{item.qty:>8}{'$' + format(item.total, ',.2f'):>12}"
            )
        self._print(RULE)
        self._print(f"Total: ${total:,.2f}")
        self._print(RULE)

    def show_payment_methods(self):
        self._print()
        self._print("Select payment method:")
        for i, method in enumerate(PaymentMethod.choices(), start=1):
            self._print(f"{i}. {method.display_name}")

    def show_checkout(self, order):
        self._print()
        self._print("You have successfully checked out the products!")
        self._print(f"Order ID: {order.order_id}")
        self._print(f"Payment Method: {order.payment_method}")
        self._print(f"Total Amount: ${order.total:,.2f}")

    def show_orders(self, orders):
        self._print()
        self._print("===== Order History =====")
        for order in orders:
            self._print(f"Order ID: {order.order_id} | Paid using {order.payment_method}")
            self._print(f"{'ID':<8}{'Name':<20}{'Price':>10}{'Qty':>8}")
            for item in order.items:
                p = item.product
                self._print(f"{p.id:<8}{p.name:<20}{'$' + format(p.price, ',.2f'):>10}{item.qty:>8}")
            self._print(f"Total Amount: ${order.total:,.2f}")
            self._print(RULE)
