"""Credit costs, purchasable packages and display helpers.

Prices are held in cents (ZAR) and shown in rand.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

CURRENCY_SYMBOL = "R"

# Credits charged per action
INTERVIEW_SESSION_COST = 30
CV_GENERATION_COST = 15

CREDIT_COSTS: dict[str, int] = {
    "interview_session": INTERVIEW_SESSION_COST,
    "cv_generation": CV_GENERATION_COST,
}


class CreditPackage(BaseModel):
    """A bundle of credits sold at a fixed price."""

    model_config = ConfigDict(frozen=True)

    id: str
    credits: int = Field(gt=0)
    price: int = Field(ge=0, description="Price in cents")
    popular: bool = False
    description: str = ""

    @property
    def price_label(self) -> str:
        return format_price(self.price)

    @property
    def credits_per_rand(self) -> float:
        return credits_per_rand(self.credits, self.price)


CREDIT_PACKAGES: tuple[CreditPackage, ...] = (
    CreditPackage(
        id="package_150",
        credits=150,
        price=1500,
        description="Perfect for occasional practice",
    ),
    CreditPackage(
        id="package_500",
        credits=500,
        price=5000,
        popular=True,
        description="Great value for regular users",
    ),
    CreditPackage(
        id="package_1000",
        credits=1000,
        price=10000,
        description="Best value for power users",
    ),
)


def get_package(package_id: str) -> CreditPackage | None:
    """Look up a credit package by id."""
    return next((package for package in CREDIT_PACKAGES if package.id == package_id), None)


def format_credits(credits: float | None) -> str:
    """Format a credit balance for display.

    Fractions are dropped and thousands are separated with commas. Missing or
    non-finite values show as "0".

    Examples:
        >>> format_credits(1500.9)
        '1,500'
        >>> format_credits(None)
        '0'
    """
    if credits is None or not math.isfinite(credits):
        return "0"
    return f"{math.floor(credits):,}"


def format_price(cents: float | None) -> str:
    """Format a price in cents as rand, e.g. 1500 -> "R15.00"."""
    if cents is None or not math.isfinite(cents):
        return f"{CURRENCY_SYMBOL}0.00"
    return f"{CURRENCY_SYMBOL}{cents / 100:.2f}"


def credits_per_rand(credits: float, cents: float) -> float:
    """Credits bought per rand spent, or 0 for a free package."""
    if cents == 0:
        return 0
    return credits / (cents / 100)


def has_enough_credits(balance: int | None, required: int) -> bool:
    """Whether a balance covers an action; a missing balance covers nothing."""
    return balance is not None and balance >= required
