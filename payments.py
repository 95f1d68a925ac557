"""Payment methods accepted at checkout.

Payment is simulated: settling only labels the order, nothing is charged.
"""

from enum import Enum

import structlog

from errors import InvalidPaymentChoiceError

logger = structlog.get_logger()


class PaymentMethod(Enum):
    CASH = "Cash"
    CARD = "Credit/Debit Card"
    GCASH = "GCash"

    @property
    def display_name(self) -> str:
        return self.value

    def settle(self, amount: float) -> None:
        logger.debug("payment_settled", method=self.name.lower(), amount=amount)

    @classmethod
    def choices(cls) -> list:
        """Methods in menu order; menu index 1 is the first element."""
        return list(cls)

    @classmethod
    def from_choice(cls, index) -> "PaymentMethod":
        methods = cls.choices()
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidPaymentChoiceError()
        if index < 1 or index > len(methods):
            raise InvalidPaymentChoiceError()
        return methods[index - 1]

    @classmethod
    def from_display_name(cls, name: str) -> "PaymentMethod":
        for method in cls:
            if method.display_name == name:
                return method
        raise ValueError(f"Unknown payment method: {name!r}")
