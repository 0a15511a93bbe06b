from .roles import IsProjectManager, IsVerifier, IsBuyer

__all__ = [
    "IsProjectManager",
    "IsVerifier",
    "IsBuyer",
]
