"""Storage key derivation for users and voucher accounts."""

DEFAULT_CURRENCY = "USD"


def user_key(name: str, last_name: str) -> str:
    """`name-lastname`, lowercased. Empty names are rejected by the user store."""
    return f"{name.lower()}-{last_name.lower()}"


def voucher_key(owner_key: str) -> str:
    """One voucher account per user and currency: `<user key>-usd`."""
    return f"{owner_key}-{DEFAULT_CURRENCY.lower()}"


def positional_key(size: int) -> str:
    """Order keys follow insertion order, not the order id."""
    return str(size + 1)
