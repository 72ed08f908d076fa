"""Account domain constants."""

# Account numbers are 7-digit values drawn from this closed range.
MIN_ACCOUNT_NUMBER = 1_000_000
MAX_ACCOUNT_NUMBER = 9_999_999

ACCOUNT_NUMBER_MAX_ATTEMPTS = 100

# Documented in the OpenAPI schema only; not enforced.
ACCOUNT_TYPE_EXAMPLES = ("Savings", "Checking", "Current")
