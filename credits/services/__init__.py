from .ledger import (
    get_buyer_holdings,
    get_buyer_retirements,
    issue_credit,
    list_available,
    notarize_credit,
    parse_amount,
    purchase,
    retire,
)

__all__ = [
    "issue_credit",
    "notarize_credit",
    "list_available",
    "purchase",
    "retire",
    "parse_amount",
    "get_buyer_holdings",
    "get_buyer_retirements",
]
