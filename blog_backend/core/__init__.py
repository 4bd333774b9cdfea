from .config import Settings, get_settings
from .security import (
    TokenClaims,
    TokenService,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "TokenClaims",
    "TokenService",
    "hash_password",
    "verify_password",
]
