# Standard library imports
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password
    
    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against
        
    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token"""
    user_id: str
    email: str


class TokenService:
    """Issues and verifies signed, time-limited identity tokens"""
    
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_seconds = expire_minutes * 60
        self._clock = clock
    
    def issue(self, user_id: str, email: str) -> str:
        """
        Create a signed token for a user
        
        Args:
            user_id: User ID, stored in the standard "sub" claim
            email: User email
            
        Returns:
            Encoded JWT token string
        """
        issued_at = int(self._clock())
        payload = {
            "sub": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._expire_seconds,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
    
    def verify(self, token: str) -> Optional[TokenClaims]:
        """
        Verify a token and extract its claims
        
        Returns:
            TokenClaims if the signature is valid, the token is not expired
            and the payload carries a user ID; None otherwise
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"], "verify_exp": False, "verify_iat": False},
            )
        except InvalidTokenError as e:
            logger.debug("Token verification failed: %s", e)
            return None
        
        # iat/exp are judged against the clock that stamped the token, not wall time
        expires_at = payload["exp"]
        if not isinstance(expires_at, (int, float)) or expires_at <= self._clock():
            logger.debug("Token verification failed: token expired")
            return None
        
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return TokenClaims(user_id=user_id, email=payload.get("email") or "")
