from utils.constants import CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a whole-unit amount, e.g. 'Rp 150000'."""
    return f"{symbol}{amount:.0f}"
