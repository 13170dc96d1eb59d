import hashlib
import hmac
import secrets
import uuid
from datetime import timedelta
from typing import Any, Protocol

import jwt
import requests
from jwt import ExpiredSignatureError, InvalidTokenError

from liftlog.adapters.base import DEFAULT_TIMEOUT_SECONDS, ApiAdapter
from liftlog.adapters.errors import ApiError, StorageError
from liftlog.adapters.storage import StoragePort
from liftlog.models import (
    AuthSession,
    ErrorKind,
    LoginCredentials,
    RegisterCredentials,
    Result,
    Role,
    User,
)
from liftlog.utils import dates
from liftlog.utils.log import logger

JWT_ALGORITHM = "HS256"
PBKDF2_ITERATIONS = 260_000


class AuthPort(Protocol):
    def login(self, credentials: LoginCredentials) -> Result[AuthSession]: ...
    def register(self, credentials: RegisterCredentials) -> Result[AuthSession]: ...
    def logout(self) -> Result[None]: ...
    def check_auth(self) -> Result[AuthSession]: ...
    def get_token(self) -> str | None: ...


def hash_password(password: str, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS
    )
    return f"{salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, _ = stored.partition("$")
    return hmac.compare_digest(hash_password(password, salt), stored)


def token_is_expired(token: str) -> bool:
    """
    True only for a JWT whose exp claim has passed. Opaque tokens are
    never considered expired here; the server remains the authority.
    """
    try:
        jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": True},
            algorithms=[JWT_ALGORITHM, "RS256"],
        )
    except ExpiredSignatureError:
        return True
    except InvalidTokenError:
        return False
    return False


class _SessionStore:
    """Current token/user pair persisted in a StoragePort under fixed keys."""

    def __init__(self, storage: StoragePort, token_key: str, user_key: str):
        self._storage = storage
        self.token_key = token_key
        self.user_key = user_key

    def save(self, user: User, token: str) -> None:
        self._storage.save(self.token_key, token)
        self._storage.save(self.user_key, user)

    def clear(self) -> None:
        self._storage.remove(self.token_key)
        self._storage.remove(self.user_key)

    def token(self) -> str | None:
        token = self._storage.load(self.token_key)
        return token if isinstance(token, str) and token else None

    def current(self) -> Result[AuthSession]:
        token = self.token()
        user_data = self._storage.load(self.user_key)

        if not token or not user_data:
            return Result.err("Not authenticated", kind=ErrorKind.AUTHORIZATION)

        if token_is_expired(token):
            return Result.err("Session expired", kind=ErrorKind.AUTHORIZATION)

        return Result.ok(AuthSession(user=User.model_validate(user_data), token=token))


# ------------------------- LOCAL -------------------------


class LocalAuthAdapter:
    """
    AuthPort that keeps a user table and the current session in local storage.
    Tokens are HS256 JWTs signed with a local secret.
    """

    USERS_KEY = "local_users"
    TOKEN_KEY = "local_auth_token"
    CURRENT_USER_KEY = "local_current_user"

    def __init__(
        self,
        storage: StoragePort,
        *,
        secret: str,
        token_ttl_seconds: int = 60 * 60 * 24 * 7,
    ):
        self._storage = storage
        self._secret = secret
        self._token_ttl = timedelta(seconds=token_ttl_seconds)
        self._session = _SessionStore(storage, self.TOKEN_KEY, self.CURRENT_USER_KEY)

    # ---- users table ----

    def _load_users(self) -> list[dict[str, Any]]:
        users = self._storage.load(self.USERS_KEY)
        return users if isinstance(users, list) else []

    def _find_user(self, email: str) -> dict[str, Any] | None:
        wanted = email.strip().lower()
        for stored in self._load_users():
            if str(stored.get("email", "")).lower() == wanted:
                return stored
        return None

    def _save_user(self, user: User, password: str) -> None:
        users = self._load_users()
        users.append(
            {
                **user.model_dump(mode="json"),
                "password_hash": hash_password(password),
            }
        )
        self._storage.save(self.USERS_KEY, users)

    @staticmethod
    def _public_user(stored: dict[str, Any]) -> User:
        return User(
            id=stored["id"],
            username=stored["username"],
            email=stored["email"],
            role=stored.get("role", Role.USER),
        )

    def _issue_token(self, user: User) -> str:
        issued_at = dates.now()
        claims = {
            "sub": user.id,
            "role": user.role.value,
            "iat": issued_at,
            "exp": issued_at + self._token_ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=JWT_ALGORITHM)

    def _start_session(self, user: User) -> AuthSession:
        token = self._issue_token(user)
        self._session.save(user, token)
        return AuthSession(user=user, token=token)

    # ---- AuthPort ----

    def register(self, credentials: RegisterCredentials) -> Result[AuthSession]:
        try:
            if self._find_user(credentials.email):
                return Result.err(
                    "User with this email already exists", kind=ErrorKind.CONFLICT
                )

            user = User(
                id=f"user_{uuid.uuid4().hex[:12]}",
                username=credentials.username,
                email=credentials.email,
                role=Role.USER,
            )
            self._save_user(user, credentials.password)
            logger.info(f"Registered local user id={user.id}")

            return Result.ok(self._start_session(user))
        except StorageError as e:
            return Result.err(f"Registration failed: {e}")

    def login(self, credentials: LoginCredentials) -> Result[AuthSession]:
        try:
            stored = self._find_user(credentials.email)
            if not stored or not verify_password(
                credentials.password, stored.get("password_hash", "")
            ):
                logger.info("Local login rejected: invalid email or password")
                return Result.err(
                    "Invalid email or password", kind=ErrorKind.AUTHORIZATION
                )

            return Result.ok(self._start_session(self._public_user(stored)))
        except StorageError as e:
            return Result.err(f"Login failed: {e}")

    def logout(self) -> Result[None]:
        try:
            self._session.clear()
        except StorageError as e:
            return Result.err(f"Logout failed: {e}")
        return Result.ok(None)

    def check_auth(self) -> Result[AuthSession]:
        try:
            current = self._session.current()
        except StorageError as e:
            return Result.err(f"Auth check failed: {e}")

        if not current.success:
            return current

        try:
            jwt.decode(current.data.token, self._secret, algorithms=[JWT_ALGORITHM])
        except InvalidTokenError:
            logger.warning("Stored local session token failed verification")
            return Result.err("Invalid session token", kind=ErrorKind.AUTHORIZATION)

        return current

    def get_token(self) -> str | None:
        return self._session.token()

    def ensure_admin_user(self, *, email: str, username: str, password: str) -> User:
        """Create the local admin account unless one with this email exists."""
        existing = self._find_user(email)
        if existing:
            return self._public_user(existing)

        admin = User(id="admin_1", username=username, email=email, role=Role.ADMIN)
        self._save_user(admin, password)
        logger.info(f"Seeded local admin user email={email}")
        return admin


# ------------------------- REMOTE -------------------------


class ApiAuthAdapter(ApiAdapter):
    """
    AuthPort backed by the remote API. Only the {user, token} pair the
    server returns is persisted locally.
    """

    resource_name = "User"

    TOKEN_KEY = "auth_token"
    CURRENT_USER_KEY = "current_user"

    def __init__(
        self,
        base_url: str,
        storage: StoragePort,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(base_url, session=session, timeout=timeout)
        self._auth_session = _SessionStore(
            storage, self.TOKEN_KEY, self.CURRENT_USER_KEY
        )

    def _authenticate(
        self, path: str, payload: dict[str, str], action: str
    ) -> Result[AuthSession]:
        try:
            response = self._safe_request("POST", path, json=payload)
        except ApiError as e:
            return Result.err(f"{action} failed: {e}")

        if not response.ok:
            body = self._json_or_none(response)
            message = body.get("message") if isinstance(body, dict) else None
            kind = (
                ErrorKind.CONFLICT
                if response.status_code == 409
                else ErrorKind.AUTHORIZATION
                if response.status_code in (400, 401, 403)
                else ErrorKind.PORT_FAILURE
            )
            if not message:
                message = (
                    "Invalid email or password"
                    if action == "Login"
                    else f"{action} failed: {response.status_code}"
                )
            return Result.err(message, kind=kind)

        try:
            auth = AuthSession.model_validate(self._json_or_none(response))
        except ValueError as e:
            logger.error(f"{action} response did not contain a user and token: {e}")
            return Result.err(f"{action} failed: unexpected response from server")

        try:
            self._auth_session.save(auth.user, auth.token)
        except StorageError as e:
            return Result.err(f"{action} failed: {e}")

        return Result.ok(auth)

    def register(self, credentials: RegisterCredentials) -> Result[AuthSession]:
        return self._authenticate(
            "/api/v1/users/register",
            {
                "username": credentials.username,
                "email": credentials.email,
                "password": credentials.password,
            },
            "Registration",
        )

    def login(self, credentials: LoginCredentials) -> Result[AuthSession]:
        return self._authenticate(
            "/api/v1/users/login",
            {"email": credentials.email, "password": credentials.password},
            "Login",
        )

    def logout(self) -> Result[None]:
        try:
            self._auth_session.clear()
        except StorageError as e:
            return Result.err(f"Logout failed: {e}")
        return Result.ok(None)

    def check_auth(self) -> Result[AuthSession]:
        try:
            return self._auth_session.current()
        except StorageError as e:
            return Result.err(f"Auth check failed: {e}")

    def get_token(self) -> str | None:
        return self._auth_session.token()
