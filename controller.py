import structlog

from errors import InvalidInputError, InvalidMenuChoiceError, InvalidProductIdError, StoreError, errmsg
from payments import PaymentMethod

logger = structlog.get_logger()

MENU_PRODUCTS = 1
MENU_CART = 2
MENU_ORDERS = 3
MENU_EXIT = 4


def parse_int(text):
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        raise InvalidInputError() from None


def parse_yes_no(text):
    answer = (text or "").strip().upper()
    if answer not in ("Y", "N"):
        raise InvalidInputError(errmsg.INVALID_YES_NO)
    return answer == "Y"


class MainController:
    """Console menu loop.

    ``read_line`` is called with no arguments and returns one line of input;
    it raises EOFError when input runs out, like ``input()``.
    """

    def __init__(self, cart_service, checkout_service, order_log, view, read_line=input):
        self.cart_service = cart_service
        self.checkout_service = checkout_service
        self.order_log = order_log
        self.view = view
        self.read_line = read_line

    # --- INPUT ---

    def ask(self, prompt):
        self.view.prompt(prompt)
        return self.read_line()

    def ask_int(self, prompt):
        # malformed numbers are re-asked, not reported as failures of the action
        while True:
            try:
                return parse_int(self.ask(prompt))
            except InvalidInputError as e:
                self.view.error(str(e))

    def ask_yes_no(self, prompt):
        return parse_yes_no(self.ask(prompt))

    # --- ACTIONS ---

    def browse_products(self):
        while True:
            self.view.show_products(self.cart_service.catalog.list_products())
            product_id = self.ask_int("Enter the ID of the product you want to add to the shopping cart: ")
            try:
                product = self.cart_service.add_to_cart(product_id)
            except InvalidProductIdError as e:
                self.view.error(str(e))
                continue
            self.view.info(f"{product.name} added successfully!")
            if not self.ask_yes_no("Do you want to add another product? (Y/N): "):
                return

    def show_cart(self):
        self.view.show_cart(self.cart_service.get_items())
        if self.cart_service.is_empty():
            return
        if not self.ask_yes_no("Do you want to check out all the products? (Y/N): "):
            return

        self.view.show_payment_methods()
        method = PaymentMethod.from_choice(self.ask_int("Enter your choice (1-3): "))
        order = self.checkout_service.checkout(self.cart_service.cart, method)
        self.view.show_checkout(order)

    def show_orders(self):
        self.view.show_orders(self.order_log.view())

    # --- LOOP ---

    def handle_choice(self, choice):
        """Run one menu action. Returns False when the user chose to exit."""
        if choice == MENU_PRODUCTS:
            self.browse_products()
        elif choice == MENU_CART:
            self.show_cart()
        elif choice == MENU_ORDERS:
            self.show_orders()
        elif choice == MENU_EXIT:
            self.view.info("Thank you for shopping with us!")
            return False
        else:
            raise InvalidMenuChoiceError()
        return True

    def run(self):
        """Serve the menu until the user exits or input ends. Returns the exit code."""
        while True:
            try:
                self.view.show_menu()
                choice = self.ask_int("Enter your choice (1-4): ")
                if not self.handle_choice(choice):
                    return 0
            except EOFError:
                logger.info("input_closed")
                return 0
            except StoreError as e:
                logger.info("action_rejected", error=type(e).__name__, detail=str(e))
                self.view.error(str(e))
            except Exception as e:
                logger.exception("unexpected_error")
                self.view.error(f"Unexpected error: {e}")
