"""
Authentication service.

Provides sign-up, sign-in and sign-out against the identity provider.
Sign-up validates input, refuses duplicate accounts and signs the new user
in straight away. Any sign-in failure is reported as AUTH_FAILED so
callers cannot tell an unknown account from a wrong password.
"""

from ..core.security import strip_bearer_prefix
from ..domain.entities import AuthResult, User
from ..domain.exceptions import DomainException, ErrorCode, ValidationException
from ..logging_config import get_logger
from ..metrics import track_signin, track_signup
from ..repositories.interfaces import UserRepository

logger = get_logger(__name__)

PASSWORD_MIN_LENGTH = 6


class AuthService:
    """Service class for account registration and session handling."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def sign_up(self, email: str, password: str, username: str) -> AuthResult:
        """
        Register a new user and sign them in.

        Args:
            email: User email address
            password: Password of at least 6 characters
            username: Display name, stored as account metadata

        Returns:
            AuthResult for the new account

        Raises:
            ValidationException: If email, password or username is invalid
            DomainException: USER_EXISTS if the email is already registered
        """
        if not email or "@" not in email:
            raise ValidationException("email", "a valid email is required")
        if len(password or "") < PASSWORD_MIN_LENGTH:
            raise ValidationException(
                "password", f"password must be at least {PASSWORD_MIN_LENGTH} characters"
            )
        if not username or not username.strip():
            raise ValidationException("username", "username is required")

        try:
            existing = self._users.find_by_email(email)
        except DomainException:
            raise
        except Exception as e:
            # The provider rejects duplicates on create as well
            logger.warning(f"Existing account lookup failed: {e}")
            existing = None

        if existing is not None:
            track_signup(success=False)
            raise DomainException(ErrorCode.USER_EXISTS, "user with this email already exists")

        try:
            created = self._users.create(email, password, username)
            result = self._users.authenticate(email, password)
        except Exception:
            track_signup(success=False)
            raise

        track_signup(success=True)
        logger.info(f"User signed up: {created.id}")

        user = User(id=result.user.id, email=result.user.email, username=username)
        return AuthResult(
            user=user,
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            expires_at=result.expires_at,
        )

    def sign_in(self, email: str, password: str) -> AuthResult:
        """
        Authenticate with email and password.

        Raises:
            ValidationException: If email or password is empty
            DomainException: AUTH_FAILED on any authentication failure
        """
        if not email:
            raise ValidationException("email", "email is required")
        if not password:
            raise ValidationException("password", "password is required")

        try:
            result = self._users.authenticate(email, password)
        except Exception as e:
            logger.warning(f"Sign in failed: {e}")
            track_signin(success=False)
            raise DomainException(ErrorCode.AUTH_FAILED, "authentication failed")

        track_signin(success=True)
        logger.info(f"User signed in: {result.user_id}")
        return result

    def sign_out(self, credential: str) -> None:
        """
        Invalidate the session behind a bearer credential.

        Raises:
            ValidationException: If no token is given
        """
        token = strip_bearer_prefix(credential)
        if not token:
            raise ValidationException("token", "token is required")

        self._users.logout(token)
