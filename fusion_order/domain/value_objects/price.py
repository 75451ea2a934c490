"""Price value object"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP


CENT = Decimal("0.01")


@dataclass(frozen=True)
class Price:
    amount: Decimal

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        object.__setattr__(self, "amount", self.amount.quantize(CENT, rounding=ROUND_HALF_UP))
        if self.amount <= 0:
            raise ValueError("Price must be greater than 0")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
