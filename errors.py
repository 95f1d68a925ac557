"""Store errors and error message constants."""


class errmsg:
    """User-facing messages for store errors."""

    INVALID_PRODUCT_ID = "Invalid product ID"
    INVALID_QUANTITY = "Quantity must be positive"
    EMPTY_CART = "Shopping cart is empty"
    NO_ORDERS = "No orders found"
    INVALID_INPUT = "Invalid input. Please enter a valid number."
    INVALID_YES_NO = "Please enter Y or N."
    INVALID_MENU_CHOICE = "Invalid menu choice. Please select 1-4."
    INVALID_PAYMENT_CHOICE = "Invalid payment method. Please select 1-3."
    ORDER_LOG_WRITE = "Order could not be recorded; your cart was kept"
    INVALID_CATALOG = "Invalid catalog"


class StoreError(Exception):
    """Base class for every error the store reports to the user."""

    message = "Store error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidProductIdError(StoreError):
    message = errmsg.INVALID_PRODUCT_ID

    def __init__(self, product_id=None, message=None):
        self.product_id = product_id
        super().__init__(message)


class InvalidQuantityError(StoreError):
    message = errmsg.INVALID_QUANTITY


class EmptyCartError(StoreError):
    message = errmsg.EMPTY_CART


class NoOrdersError(StoreError):
    message = errmsg.NO_ORDERS


class InvalidInputError(StoreError):
    message = errmsg.INVALID_INPUT


class InvalidMenuChoiceError(StoreError):
    message = errmsg.INVALID_MENU_CHOICE


class InvalidPaymentChoiceError(StoreError):
    message = errmsg.INVALID_PAYMENT_CHOICE


class OrderLogWriteError(StoreError):
    """The order could not be written durably; checkout did not complete."""

    message = errmsg.ORDER_LOG_WRITE


class CatalogError(StoreError):
    message = errmsg.INVALID_CATALOG
