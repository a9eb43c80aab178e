"""
Payment processors.

Real gateways are out of scope; SimulatedPaymentProcessor approximates
one: it rejects malformed cards and declines a configurable share of
otherwise valid charges.
"""

import random
import string
import time
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Protocol

from hotel_booking.schemas.payment.payment_request import PaymentData

TRANSACTION_ALPHABET = string.digits + string.ascii_uppercase


@dataclass(frozen=True)
class ChargeResult:
    success: bool
    amount: Decimal
    currency: str
    transaction_id: Optional[str] = None
    last4: Optional[str] = None
    decline_reason: Optional[str] = None

    @classmethod
    def declined(cls, amount: Decimal, currency: str, reason: str) -> "ChargeResult":
        return cls(success=False, amount=amount, currency=currency, decline_reason=reason)


class PaymentProcessor(Protocol):
    def charge(self, amount: Decimal, currency: str, details: PaymentData) -> ChargeResult:
        ...


class SimulatedPaymentProcessor:
    """Card processor stand-in with a fixed decline probability."""

    def __init__(
        self,
        decline_rate: float = 0.1,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
        today: Callable[[], date] = date.today,
    ):
        self.decline_rate = decline_rate
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._today = today

    def charge(self, amount: Decimal, currency: str, details: PaymentData) -> ChargeResult:
        card_number = details.card_number.replace(" ", "")
        if len(card_number) != 16 or not card_number.isdigit():
            return ChargeResult.declined(amount, currency, "Invalid card number")

        cvv = details.cvv.strip()
        if not (3 <= len(cvv) <= 4 and cvv.isdigit()):
            return ChargeResult.declined(amount, currency, "Invalid CVV")

        today = self._today()
        if (details.expiry_year, details.expiry_month) < (today.year, today.month):
            return ChargeResult.declined(amount, currency, "Card expired")

        if self._rng.random() < self.decline_rate:
            return ChargeResult.declined(amount, currency, "Payment declined by bank")

        return ChargeResult(
            success=True,
            amount=amount,
            currency=currency,
            transaction_id=self._transaction_id(),
            last4=card_number[-4:],
        )

    def _transaction_id(self) -> str:
        suffix = "".join(self._rng.choice(TRANSACTION_ALPHABET) for _ in range(8))
        return f"TXN_{self._clock()}_{suffix}"
