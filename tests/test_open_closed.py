# tests/test_open_closed.py
"""
Tests for the Open/Closed illustration (payment strategies + factory).
"""

import pytest

from solid_principles.core import UnknownVariantError
from solid_principles.principles.open_closed import (
    BankTransferPayment,
    CreditCardPayment,
    PaymentMethod,
    PaymentProcessor,
    PaymentService,
    PayPalPayment,
    available_payment_methods,
    create_payment_method,
    run_adherence,
    run_violation,
)

pytestmark = pytest.mark.tier1


# ---------------------------------------------------------------------
# Violating
# ---------------------------------------------------------------------


def test_processor_handles_known_methods():
    processor = PaymentProcessor()
    assert processor.process("credit_card", 100) == "Processing credit card payment of $100.00"
    assert processor.process("paypal", 50) == "Processing PayPal payment of $50.00"


def test_processor_rejects_methods_it_was_not_edited_for():
    with pytest.raises(UnknownVariantError, match="bank_transfer"):
        PaymentProcessor().process("bank_transfer", 10)


def test_violation_driver_reports_the_missing_method(out):
    run_violation(out)

    assert len(out) == 3
    assert out.lines[-1].startswith("Error: Unsupported payment method")


# ---------------------------------------------------------------------
# Adhering
# ---------------------------------------------------------------------


def test_payment_method_is_abstract():
    with pytest.raises(TypeError):
        PaymentMethod()


@pytest.mark.parametrize(
    "name, cls",
    [
        ("credit_card", CreditCardPayment),
        ("paypal", PayPalPayment),
        ("bank_transfer", BankTransferPayment),
    ],
)
def test_factory_returns_the_right_strategy(name, cls):
    assert isinstance(create_payment_method(name), cls)


def test_factory_rejects_unknown_variant():
    with pytest.raises(UnknownVariantError) as exc_info:
        create_payment_method("bitcoin")

    message = str(exc_info.value)
    assert "bitcoin" in message
    assert "Available" in message
    assert "paypal" in message


def test_unknown_variant_is_a_value_error():
    with pytest.raises(ValueError):
        create_payment_method("bitcoin")


def test_service_works_with_a_new_strategy_without_modification():
    class GiftCardPayment(PaymentMethod):
        name = "gift_card"

        def pay(self, amount):
            return f"Redeeming gift card for ${amount:.2f}"

    service = PaymentService(GiftCardPayment())
    assert service.process(20) == "Redeeming gift card for $20.00"


def test_adherence_driver_handles_every_method(out):
    run_adherence(out)

    assert out.lines == [
        "Processing credit card payment of $100.00",
        "Processing PayPal payment of $50.00",
        "Processing bank transfer of $75.00",
    ]


def test_available_methods_sorted():
    assert available_payment_methods() == ["bank_transfer", "credit_card", "paypal"]
