"""Display formatting helpers."""


def format_price(amount: int) -> str:
    """Format a price for display, e.g. 1200 -> '$1,200'."""
    return f"${amount:,}"
