"""
Per-request identity resolution.

The gate never rejects a request. It turns the Authorization header into
an Identity: Anonymous when the header is missing or the token does not
verify, Authenticated otherwise. Protected use cases take the Identity as
an explicit argument and call require_authenticated() on it.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Optional, Union

# Local application imports
from ..core.errors import AuthenticationError
from ..core.security import TokenService

BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class Anonymous:
    """No usable identity was presented"""


@dataclass(frozen=True)
class Authenticated:
    user_id: str
    email: str = ""


Identity = Union[Anonymous, Authenticated]

ANONYMOUS = Anonymous()


def _extract_token(authorization_header: Optional[str]) -> Optional[str]:
    if not authorization_header:
        return None
    value = authorization_header.strip()
    # Both "Bearer <token>" and a bare token are accepted
    if value.lower().startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):].strip()
    return value or None


def resolve_identity(authorization_header: Optional[str], token_service: TokenService) -> Identity:
    """
    Resolve the caller's identity from an Authorization header value.

    Args:
        authorization_header: Raw header value, or None if absent
        token_service: Service used to verify the token

    Returns:
        Authenticated if the token verifies, Anonymous otherwise
    """
    token = _extract_token(authorization_header)
    if token is None:
        return ANONYMOUS

    claims = token_service.verify(token)
    if claims is None:
        return ANONYMOUS

    return Authenticated(user_id=claims.user_id, email=claims.email)


def require_authenticated(identity: Identity) -> Authenticated:
    """Return the authenticated identity, or raise a 401 for anonymous callers"""
    if isinstance(identity, Authenticated):
        return identity
    raise AuthenticationError("Not authenticated!")
