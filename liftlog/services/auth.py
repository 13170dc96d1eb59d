from liftlog.adapters.auth import AuthPort
from liftlog.domain.validators import (
    validate_login_credentials,
    validate_register_credentials,
)
from liftlog.models import (
    AuthSession,
    ErrorKind,
    LoginCredentials,
    RegisterCredentials,
    Result,
    User,
)
from liftlog.utils.log import logger


class AuthService:
    """
    Validates credentials and delegates to whichever AuthPort it was built
    with. Invalid input never reaches the port and no exception escapes.
    """

    def __init__(self, auth_port: AuthPort):
        self._port = auth_port

    def login(self, credentials: LoginCredentials) -> Result[AuthSession]:
        validation = validate_login_credentials(credentials)
        if not validation.valid:
            return Result.err(
                f"Validation failed: {validation.joined()}", kind=ErrorKind.VALIDATION
            )

        try:
            return self._port.login(credentials)
        except Exception as e:
            logger.exception("Auth port raised during login")
            return Result.err(f"Login failed: {e}")

    def register(self, credentials: RegisterCredentials) -> Result[AuthSession]:
        validation = validate_register_credentials(credentials)
        if not validation.valid:
            return Result.err(
                f"Validation failed: {validation.joined()}", kind=ErrorKind.VALIDATION
            )

        try:
            return self._port.register(credentials)
        except Exception as e:
            logger.exception("Auth port raised during registration")
            return Result.err(f"Registration failed: {e}")

    def logout(self) -> Result[None]:
        try:
            return self._port.logout()
        except Exception as e:
            logger.exception("Auth port raised during logout")
            return Result.err(f"Logout failed: {e}")

    def check_auth(self) -> Result[AuthSession]:
        try:
            return self._port.check_auth()
        except Exception as e:
            logger.exception("Auth port raised during auth check")
            return Result.err(f"Auth check failed: {e}")

    def get_token(self) -> str | None:
        try:
            return self._port.get_token()
        except Exception:
            logger.exception("Failed to get token")
            return None

    def get_current_user(self) -> User | None:
        result = self.check_auth()
        return result.data.user if result.success and result.data else None

    def is_authenticated(self) -> bool:
        return self.check_auth().success
