# solid_principles/principles/open_closed.py
"""
Open/Closed Principle.

Software entities should be open for extension but closed for modification.
The adhering half is the Strategy pattern plus a small factory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from solid_principles.core import Illustration, PrincipleExample, Transcript, UnknownVariantError

# =============================================================================
# Violating
# =============================================================================


class PaymentProcessor:
    """Every new payment method means editing process()."""

    def process(self, method: str, amount: float) -> str:
        if method == "credit_card":
            return f"Processing credit card payment of ${amount:.2f}"
        elif method == "paypal":
            return f"Processing PayPal payment of ${amount:.2f}"
        else:
            raise UnknownVariantError(f"Unsupported payment method: {method!r}")


def run_violation(out: Transcript) -> None:
    processor = PaymentProcessor()
    out.write(processor.process("credit_card", 100))
    out.write(processor.process("paypal", 50))
    try:
        processor.process("bank_transfer", 75)
    except UnknownVariantError as e:
        out.write(f"Error: {e}")


# =============================================================================
# Adhering
# =============================================================================


class PaymentMethod(ABC):
    name: str = ""

    @abstractmethod
    def pay(self, amount: float) -> str:
        raise NotImplementedError


class CreditCardPayment(PaymentMethod):
    name = "credit_card"

    def pay(self, amount: float) -> str:
        return f"Processing credit card payment of ${amount:.2f}"


class PayPalPayment(PaymentMethod):
    name = "paypal"

    def pay(self, amount: float) -> str:
        return f"Processing PayPal payment of ${amount:.2f}"


class BankTransferPayment(PaymentMethod):
    """Added later without touching PaymentService."""

    name = "bank_transfer"

    def pay(self, amount: float) -> str:
        return f"Processing bank transfer of ${amount:.2f}"


class PaymentService:
    """Closed for modification: works with any PaymentMethod."""

    def __init__(self, method: PaymentMethod):
        self.method = method

    def process(self, amount: float) -> str:
        return self.method.pay(amount)


PAYMENT_METHODS: Dict[str, Type[PaymentMethod]] = {
    cls.name: cls for cls in (CreditCardPayment, PayPalPayment, BankTransferPayment)
}


def available_payment_methods() -> List[str]:
    return sorted(PAYMENT_METHODS)


def create_payment_method(name: str) -> PaymentMethod:
    """
    Factory for payment strategies.

    Raises:
        UnknownVariantError: If no payment method is registered under `name`
    """
    try:
        return PAYMENT_METHODS[name]()
    except KeyError:
        raise UnknownVariantError(
            f"Unknown payment method: {name!r}. Available: {available_payment_methods()}"
        ) from None


def run_adherence(out: Transcript) -> None:
    for name, amount in (("credit_card", 100), ("paypal", 50), ("bank_transfer", 75)):
        service = PaymentService(create_payment_method(name))
        out.write(service.process(amount))


EXAMPLE = PrincipleExample(
    key="open_closed",
    letter="O",
    title="Open/Closed Principle",
    summary=(
        "Classes should be open for extension but closed for modification. New "
        "behaviour is added by writing new code, not by editing code that works."
    ),
    violation=Illustration(
        description="Supporting a bank transfer means editing the if/elif chain in PaymentProcessor.",
        members=(PaymentProcessor,),
        driver=run_violation,
    ),
    adherence=Illustration(
        description="Each payment method is a strategy; a new one is a new class registered with the factory.",
        members=(
            PaymentMethod,
            CreditCardPayment,
            PayPalPayment,
            BankTransferPayment,
            PaymentService,
            create_payment_method,
        ),
        driver=run_adherence,
    ),
    aliases=("ocp", "open-closed"),
)
