# Standard library imports
from typing import Optional

# External package imports
from fastapi import Header

# Local application imports
from ...application.auth_gate import Identity, resolve_identity
from ...core.security import TokenService
from ...di.container import get_container


async def get_identity(authorization: Optional[str] = Header(default=None)) -> Identity:
    """
    FastAPI dependency resolving the caller's identity from the Authorization header
    
    Never rejects the request: a missing, malformed or expired token yields
    Anonymous. Routes that need a user call require_authenticated() on the result.
    
    Args:
        authorization: Raw Authorization header ("Bearer <token>" or a bare token)
        
    Returns:
        Authenticated or Anonymous identity
    """
    token_service = get_container().get(TokenService)
    return resolve_identity(authorization, token_service)
