"""Path grammar shared by the route table.

Patterns are compiled case-insensitively and matched against the whole path.
"""

CURRENCY_CODE_PATTERN = r"([a-z]{3})"
# digits[.digits] or .digits, at least one digit
AMOUNT_PATTERN = r"([0-9]*\.?[0-9]+)"

RATE_PATH = rf"/rate/{CURRENCY_CODE_PATTERN}/{CURRENCY_CODE_PATTERN}"
RATE_VALUE_PATH = rf"{RATE_PATH}/{AMOUNT_PATTERN}"
CONVERSION_PATH = (
    rf"/conversion/{CURRENCY_CODE_PATTERN}/{CURRENCY_CODE_PATTERN}/{AMOUNT_PATTERN}"
)
