"""
Booking pricing calculations.

Nightly-rate pricing with tax and deposit. Amounts are computed with
Decimal at full precision; rounding to cents happens once, in
PricingBreakdown.rounded(), when a price is stored or shown.
"""

import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional, Union

from hotel_booking.config.settings import Settings
from hotel_booking.core.exceptions import InvalidDateRangeError

CENTS = Decimal("0.01")

NumberLike = Union[Decimal, int, str, float]


def _to_decimal(value: NumberLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats such as 0.12 from expanding to binary noise
    return Decimal(str(value))


def count_nights(check_in: date, check_out: date) -> int:
    """
    Number of billable nights between two dates.

    Partial days (when datetimes are given) are charged as a full night.
    """
    if isinstance(check_in, datetime) and isinstance(check_out, datetime):
        seconds = (check_out - check_in).total_seconds()
        return math.ceil(seconds / 86400)
    if isinstance(check_in, datetime):
        check_in = check_in.date()
    if isinstance(check_out, datetime):
        check_out = check_out.date()
    return (check_out - check_in).days


@dataclass(frozen=True)
class PricingBreakdown:
    """Price of a stay."""

    base_rate: Decimal
    nights: int
    subtotal: Decimal
    taxes: Decimal
    total_amount: Decimal
    deposit_required: Decimal
    remaining_amount: Decimal
    tax_rate: Decimal
    deposit_percentage: Decimal
    currency: Optional[str] = None

    def rounded(self) -> "PricingBreakdown":
        """Copy with every amount rounded half-up to cents."""
        return replace(
            self,
            base_rate=self.base_rate.quantize(CENTS, rounding=ROUND_HALF_UP),
            subtotal=self.subtotal.quantize(CENTS, rounding=ROUND_HALF_UP),
            taxes=self.taxes.quantize(CENTS, rounding=ROUND_HALF_UP),
            total_amount=self.total_amount.quantize(CENTS, rounding=ROUND_HALF_UP),
            deposit_required=self.deposit_required.quantize(CENTS, rounding=ROUND_HALF_UP),
            remaining_amount=self.remaining_amount.quantize(CENTS, rounding=ROUND_HALF_UP),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_rate": self.base_rate,
            "nights": self.nights,
            "subtotal": self.subtotal,
            "taxes": self.taxes,
            "total_amount": self.total_amount,
            "deposit_required": self.deposit_required,
            "remaining_amount": self.remaining_amount,
            "tax_rate": self.tax_rate,
            "deposit_percentage": self.deposit_percentage,
            "currency": self.currency,
        }


def calculate_pricing(
    base_rate: NumberLike,
    check_in: date,
    check_out: date,
    tax_rate: NumberLike,
    deposit_percentage: NumberLike,
    currency: Optional[str] = None,
) -> PricingBreakdown:
    """
    Price a stay at a flat nightly rate.

    Raises:
        InvalidDateRangeError: If the stay has no billable night
    """
    nights = count_nights(check_in, check_out)
    if nights < 1:
        raise InvalidDateRangeError(
            start_date=check_in.isoformat(),
            end_date=check_out.isoformat(),
        )

    rate = _to_decimal(base_rate)
    tax = _to_decimal(tax_rate)
    deposit = _to_decimal(deposit_percentage)

    subtotal = rate * nights
    taxes = subtotal * tax
    total_amount = subtotal + taxes
    deposit_required = total_amount * deposit

    return PricingBreakdown(
        base_rate=rate,
        nights=nights,
        subtotal=subtotal,
        taxes=taxes,
        total_amount=total_amount,
        deposit_required=deposit_required,
        remaining_amount=total_amount - deposit_required,
        tax_rate=tax,
        deposit_percentage=deposit,
        currency=currency,
    )


@dataclass(frozen=True)
class PricingPolicy:
    """Tax and deposit terms applied to every booking."""

    tax_rate: Decimal
    deposit_percentage: Decimal
    currency: str = "PGK"

    @classmethod
    def from_settings(cls, settings: Settings) -> "PricingPolicy":
        return cls(
            tax_rate=settings.TAX_RATE,
            deposit_percentage=settings.DEPOSIT_PERCENTAGE,
            currency=settings.CURRENCY,
        )

    def price(
        self,
        base_rate: NumberLike,
        check_in: date,
        check_out: date,
        currency: Optional[str] = None,
    ) -> PricingBreakdown:
        return calculate_pricing(
            base_rate,
            check_in,
            check_out,
            self.tax_rate,
            self.deposit_percentage,
            currency=currency or self.currency,
        )
