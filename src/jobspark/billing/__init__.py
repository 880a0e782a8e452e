"""Credit pricing used to pay for interview sessions and CV generation."""

from jobspark.billing.credits import (
    CREDIT_COSTS,
    CREDIT_PACKAGES,
    CreditPackage,
    credits_per_rand,
    format_credits,
    format_price,
    get_package,
    has_enough_credits,
)

__all__ = [
    "CREDIT_COSTS",
    "CREDIT_PACKAGES",
    "CreditPackage",
    "credits_per_rand",
    "format_credits",
    "format_price",
    "get_package",
    "has_enough_credits",
]
