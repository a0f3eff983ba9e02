"""
Minimal authentication service: registration, login and role-based permission checks.
Users live in an explicit UserRepository handed to the service, never in module state.
"""

import logging
import threading

from passlib.context import CryptContext

from config.config import AuthConfig
from models.enums import UserRole
from models.user import User
from services.errors import AuthenticationError, DuplicateKeyError, InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)


class UserRepository:
    """In-memory user store keyed by username."""

    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User) -> User:
        with self._lock:
            if user.username in self._users:
                raise DuplicateKeyError("User", user.username)
            self._users[user.username] = user
        return user

    def get(self, username: str) -> User:
        user = self.find(username)
        if user is None:
            raise NotFoundError("User", username)
        return user

    def find(self, username: str) -> User | None:
        return self._users.get(username)

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)


def build_password_context(config: AuthConfig | None = None) -> CryptContext:
    config = config or AuthConfig()
    return CryptContext(schemes=config.password_schemes, deprecated="auto")


class AuthService:
    """
    Registers users with hashed passwords, verifies logins and answers
    permission checks by looking up the user's role directly.
    """

    def __init__(self, repository: UserRepository, pwd_context: CryptContext | None = None):
        self.repository = repository
        self.pwd_context = pwd_context if pwd_context is not None else build_password_context()

    def register(self, username: str, password: str, role: UserRole = UserRole.CUSTOMER) -> User:
        """
        Create a user. The plaintext password is hashed and then discarded.

        Raises:
            InvalidArgumentError: if username or password is empty.
            DuplicateKeyError: if the username is taken.
        """
        if not username or not password:
            raise InvalidArgumentError("Username and password are required")
        if username in self.repository:
            logger.warning(f"Registration rejected: user {username} already exists")
            raise DuplicateKeyError("User", username)

        user = User(username=username, hashed_password=self.pwd_context.hash(password), role=role)
        self.repository.add(user)
        logger.info(f"Registered user {username} with role {role.value}")
        return user

    def login(self, username: str, password: str) -> User:
        """
        Verify credentials and return the user.

        Raises:
            AuthenticationError: for an unknown user, an inactive user or a wrong password.
        """
        user = self.repository.find(username)
        if user is None or not user.is_active or not self.pwd_context.verify(password, user.hashed_password):
            logger.warning(f"Failed login attempt for {username}")
            raise AuthenticationError("Invalid username or password")
        logger.info(f"User {username} logged in")
        return user

    def has_permission(self, username: str, required_role: UserRole) -> bool:
        """True when the user exists, is active and holds at least the required role."""
        user = self.repository.find(username)
        if user is None or not user.is_active:
            return False
        return user.role.rank >= required_role.rank
