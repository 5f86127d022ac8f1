"""Payment status derivation for invoices."""

from typing import Any, Iterable, Optional

from ..models.payment import PaymentSummary
from ..number_normalizer import to_amount

# Paid amounts above the total by less than this are not capped
_OVERPAY_EPSILON = 0.0001


def derive_payment_status(
    grand_total: float,
    payments: Iterable[Any] = (),
    stored_paid: Any = 0.0,
    tolerance: Optional[float] = None
) -> PaymentSummary:
    """Derive paid/remaining amounts and status of an invoice.

    Args:
        grand_total: Grand total from the aggregator
        payments: Individual payment amounts
        stored_paid: Paid amount stored on the invoice, used when the
            payments sum to nothing
        tolerance: Balance treated as settled (default: configured, 0.01)

    Returns:
        PaymentSummary

    Status assignment:
    - remaining <= tolerance, or paid >= total - tolerance -> "paid"
    - anything paid -> "partial"
    - otherwise -> "draft"
    """
    if tolerance is None:
        from ..config import get_payment_tolerance
        tolerance = get_payment_tolerance()

    total = max(0.0, to_amount(grand_total))
    payments_sum = sum(to_amount(payment) for payment in payments)
    paid = payments_sum if payments_sum > 0 else max(0.0, to_amount(stored_paid))

    if total > 0 and paid - total > _OVERPAY_EPSILON:
        paid = total

    remaining = round(max(0.0, total - paid), 2)
    if remaining <= tolerance:
        remaining = 0.0

    if remaining <= tolerance or paid >= total - tolerance:
        status = "paid"
    elif paid > 0:
        status = "partial"
    else:
        status = "draft"

    return PaymentSummary(total=total, paid=paid, remaining=remaining, status=status)
