from .avalanche import AvalancheClient, NotaryUnavailable
from .notary import ChainNotary, explorer_url, get_notary, network_info, notarize

__all__ = [
    "AvalancheClient",
    "NotaryUnavailable",
    "ChainNotary",
    "explorer_url",
    "get_notary",
    "network_info",
    "notarize",
]
