from typing import Any, Callable, TypeVar

import requests

from liftlog.adapters.errors import ApiError
from liftlog.models import ErrorKind, Result
from liftlog.utils.log import logger

T = TypeVar("T")

TokenProvider = Callable[[], str | None]

DEFAULT_TIMEOUT_SECONDS = 10.0


class ApiAdapter:
    """
    Base class for adapters talking JSON over HTTP to the exercise-logging API.
    """

    # Used in 404 messages, e.g. "Muscle group not found"
    resource_name = "Resource"
    forbidden_message = "Access denied. Admin role required."

    def __init__(
        self,
        base_url: str,
        *,
        session: requests.Session | None = None,
        token_provider: TokenProvider | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._token_provider = token_provider
        self._timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _headers(self, token: str | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _safe_request(
        self, method: str, path: str, *, token: str | None = None, **kwargs
    ) -> requests.Response:
        """Send a request and wrap transport failures in ApiError."""
        try:
            return self._session.request(
                method,
                self._url(path),
                headers=self._headers(token),
                timeout=self._timeout,
                **kwargs,
            )
        except requests.Timeout as e:
            logger.warning(f"API request timed out: {method} {path}")
            raise ApiError("Request timeout") from e
        except requests.RequestException as e:
            logger.exception(f"API request failed: {method} {path}")
            raise ApiError(f"Network error: {e}") from e

    @staticmethod
    def _json_or_none(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _error_result(self, response: requests.Response) -> Result[Any]:
        status = response.status_code

        if status == 401:
            return Result.err(
                "Authentication required. Please log in again.",
                kind=ErrorKind.AUTHORIZATION,
            )
        if status == 403:
            return Result.err(self.forbidden_message, kind=ErrorKind.AUTHORIZATION)
        if status == 404:
            return Result.err(
                f"{self.resource_name} not found", kind=ErrorKind.NOT_FOUND
            )
        if status == 409:
            body = self._json_or_none(response)
            message = None
            if isinstance(body, dict):
                message = body.get("error") or body.get("message")
            return Result.err(
                message
                or f"Conflict: {self.resource_name.lower()} already exists or is still referenced",
                kind=ErrorKind.CONFLICT,
            )

        logger.warning(f"API returned unexpected status={status}")
        return Result.err(f"Server error: {status}", kind=ErrorKind.PORT_FAILURE)

    def _fetch(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        *,
        token: str | None = None,
        **kwargs,
    ) -> Result[T]:
        """Request whose outcome is always a Result. 204 succeeds with no data."""
        try:
            response = self._safe_request(method, path, token=token, **kwargs)
        except ApiError as e:
            return Result.err(str(e), kind=ErrorKind.PORT_FAILURE)

        if not response.ok:
            return self._error_result(response)

        if response.status_code == 204:
            return Result.ok(None)

        body = self._json_or_none(response)
        try:
            return Result.ok(parse(body))
        except (TypeError, ValueError) as e:
            logger.error(f"Unexpected response body for {method} {path}: {e}")
            return Result.err(
                "Unexpected response from server", kind=ErrorKind.PORT_FAILURE
            )

    def _fetch_with_auth(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        **kwargs,
    ) -> Result[T]:
        """
        Authenticated _fetch. A missing token short-circuits without touching
        the network.
        """
        token = self._token_provider() if self._token_provider else None
        if not token:
            return Result.err("No authentication token", kind=ErrorKind.AUTHORIZATION)

        return self._fetch(method, path, parse, token=token, **kwargs)

    def _fetch_public(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        **kwargs,
    ) -> Result[T]:
        """_fetch for endpoints that take no bearer token."""
        return self._fetch(method, path, parse, **kwargs)
