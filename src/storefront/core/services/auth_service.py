"""Admin login and token authentication."""

from dataclasses import dataclass

from loguru import logger
from sqlmodel import Session

from src.storefront.core.exceptions import InvalidCredentials, ValidationError
from src.storefront.core.security import dummy_password_hash, verify_password
from src.storefront.core.services.jwt import AuthTokenService
from src.storefront.entities.user import AdminIdentity, UserRepository


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: AdminIdentity


class AuthService:
    def __init__(self, session: Session, token_service: AuthTokenService):
        self._users = UserRepository(session)
        self._tokens = token_service

    def login(self, username: str | None, password: str | None) -> LoginResult:
        """Exchange credentials for a signed token.

        Unknown usernames and wrong passwords fail identically.

        Raises:
            ValidationError: Username or password missing
            InvalidCredentials: No such user or wrong password
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        user = self._users.get_by_username(username)
        if user is None:
            verify_password(dummy_password_hash(), password)
            logger.info("Login failed for unknown user")
            raise InvalidCredentials()

        if not verify_password(user.password, password):
            logger.info("Login failed for user '{}'", username)
            raise InvalidCredentials()

        identity = user.identity()
        logger.info("Admin '{}' logged in", identity.username)
        return LoginResult(token=self._tokens.issue(identity), user=identity)

    def authenticate(self, token: str) -> AdminIdentity:
        """Verify a bearer token; raises TokenRejected when it is not valid."""
        return self._tokens.verify(token)
