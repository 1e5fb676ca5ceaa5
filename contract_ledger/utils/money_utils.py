"""Money formatting utilities"""

from contract_ledger.domain.models import Amount


def format_euros(amount: Amount) -> str:
    """Format an amount with thousands separators and a euro sign, e.g. 5,000€"""
    if float(amount).is_integer():
        return f"{int(amount):,}€"
    return f"{amount:,.2f}€"
