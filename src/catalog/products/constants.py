"""Business-rule constants for the Product catalogue."""

MAX_DISCOUNT = 75
MIN_DISCOUNT = 0

DISCOUNT_TOO_HIGH_MESSAGE = f"Product discount can not be higher than {MAX_DISCOUNT}!"
DISCOUNT_NEGATIVE_MESSAGE = "Product discount can not be negative!"
DISCOUNT_INVALID_MESSAGE = (
    f"Product discount must be a number between {MIN_DISCOUNT} and {MAX_DISCOUNT}!"
)
