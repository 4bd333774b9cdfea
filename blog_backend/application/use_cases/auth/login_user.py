# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.errors import AuthenticationError
from ....core.security import TokenService, verify_password
from ...validators import check_email, check_min_length, first_failure
from ...dto.auth_dto import UserLoginRequest, AuthDataResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing an access token"""
    
    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service
    
    async def execute(self, request: UserLoginRequest) -> AuthDataResponse:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            AuthDataResponse with the token and the user's ID
            
        Raises:
            ValidationError: If email or password is malformed
            AuthenticationError: If the user does not exist or the password is wrong
        """
        first_failure(
            check_email(request.email),
            check_min_length(request.password, "password"),
        )
        
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise AuthenticationError("User not found.")
        
        if not verify_password(request.password, user.hashed_password):
            raise AuthenticationError("Password is incorrect.")
        
        token = self.token_service.issue(user.id or "", user.email)
        logger.info("User %s logged in", user.id)
        return AuthDataResponse(token=token, user_id=user.id or "")
