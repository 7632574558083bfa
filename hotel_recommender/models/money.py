"""Fixed-point monetary amounts in currency minor units."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CurrencyMismatchError(ValueError):
    """Raised when amounts in different currencies are compared or combined."""

    pass


class Money(BaseModel):
    """Integer amount of minor units (e.g. cents) tagged with a currency code.

    Arithmetic and comparisons stay in integers so budget checks are exact.
    Comparing amounts in different currencies raises CurrencyMismatchError.
    """

    amount: int = Field(strict=True, description="Amount in currency minor units")
    currency: str = Field(description="ISO 4217 currency code, e.g. 'USD'")

    model_config = ConfigDict(frozen=True)

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        code = value.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Invalid currency code: {value!r}")
        return code

    def multiply(self, factor: int) -> "Money":
        """Return this amount multiplied by an integer factor."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Money can only be multiplied by int, got {type(factor).__name__}")
        return Money(amount=self.amount * factor, currency=self.currency)

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot compare {self.currency} with {other.currency}"
            )

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
