import logging

import pytest
from passlib.context import CryptContext

from config.config import AuthConfig
from models.enums import UserRole
from models.user import User
from services.auth import AuthService, UserRepository, build_password_context
from services.errors import AuthenticationError, DuplicateKeyError, InvalidArgumentError, NotFoundError


@pytest.fixture
def repository() -> UserRepository:
    return UserRepository()


@pytest.fixture
def auth(repository) -> AuthService:
    service = AuthService(repository)
    service.register("alice", "password123", UserRole.MANAGER)
    service.register("bob", "pass987")
    return service


def test_register_hashes_password(auth, repository):
    user = repository.get("alice")
    assert user.role == UserRole.MANAGER
    assert user.hashed_password != "password123"
    assert auth.pwd_context.verify("password123", user.hashed_password)
    assert repository.get("bob").role == UserRole.CUSTOMER


def test_register_duplicate_raises(auth, repository):
    with pytest.raises(DuplicateKeyError, match="User 'alice' already exists"):
        auth.register("alice", "another")
    assert len(repository) == 2


@pytest.mark.parametrize("username, password", [("", "secret"), ("carol", "")])
def test_register_requires_credentials(auth, username, password):
    with pytest.raises(InvalidArgumentError):
        auth.register(username, password)


def test_login_success(auth):
    user = auth.login("alice", "password123")
    assert user.username == "alice"


@pytest.mark.parametrize("username, password", [("alice", "wrong"), ("nobody", "password123")])
def test_login_failure(auth, username, password, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(AuthenticationError, match="Invalid username or password"):
            auth.login(username, password)
    assert f"Failed login attempt for {username}" in caplog.text


def test_login_inactive_user(repository):
    context = build_password_context()
    repository.add(User(username="dave", hashed_password=context.hash("pw"), is_active=False))
    service = AuthService(repository, pwd_context=context)
    with pytest.raises(AuthenticationError):
        service.login("dave", "pw")
    assert not service.has_permission("dave", UserRole.CUSTOMER)


def test_has_permission_is_a_direct_role_lookup(auth):
    assert auth.has_permission("alice", UserRole.MANAGER)
    assert auth.has_permission("alice", UserRole.STAFF)
    assert not auth.has_permission("alice", UserRole.ADMIN)
    assert auth.has_permission("bob", UserRole.CUSTOMER)
    assert not auth.has_permission("bob", UserRole.STAFF)
    assert not auth.has_permission("nobody", UserRole.CUSTOMER)


def test_repositories_are_independent(auth):
    other = AuthService(UserRepository())
    assert not other.has_permission("alice", UserRole.CUSTOMER)
    with pytest.raises(AuthenticationError):
        other.login("alice", "password123")


def test_repository_get_unknown_raises(repository):
    with pytest.raises(NotFoundError):
        repository.get("ghost")
    assert repository.find("ghost") is None
    assert "ghost" not in repository


def test_password_context_uses_configured_schemes():
    context = build_password_context(AuthConfig(password_schemes=["pbkdf2_sha256"]))
    assert isinstance(context, CryptContext)
    assert context.identify(context.hash("pw")) == "pbkdf2_sha256"
