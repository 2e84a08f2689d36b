"""
Shared HTTP client for the payment API.

Owns transport concerns (base URL, authentication headers, timeouts,
connection pooling) and maps every failure to ``PaymentAPIError``. Resource
modules only compose paths and hand over parameter structures.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from payapi.encoding import to_json, to_query_string
from payapi.exceptions import ErrorKind, PaymentAPIError
from payapi.logging import get_logger
from payapi.settings import BodyEncoding, get_settings

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

USER_AGENT = "payapi-python"


class Client:
    """Synchronous API client used by every resource operation."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        body_encoding: BodyEncoding | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Unset arguments fall back to ``payapi.settings``.

        Args:
            api_key: Secret key sent as a bearer token
            base_url: API root (e.g., https://api.stripe.com/v1)
            api_version: Value of the ``Stripe-Version`` header
            timeout: Request timeout in seconds
            body_encoding: Encoding of POST bodies (form or json)
            http_client: Pre-built httpx client; the caller keeps ownership
        """
        settings = get_settings()

        self.api_key = api_key if api_key is not None else settings.api_key
        self.base_url = (base_url or settings.api_base).rstrip("/")
        self.api_version = api_version if api_version is not None else settings.api_version
        self.timeout = timeout if timeout is not None else settings.timeout_seconds
        self.body_encoding = BodyEncoding(body_encoding or settings.body_encoding)

        self._client = http_client
        self._owns_client = http_client is None

        if not self.api_key:
            logger.warning("API client created without an API key", base_url=self.base_url)

    @property
    def is_configured(self) -> bool:
        """Check if the client has credentials."""
        return bool(self.api_key)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        return headers

    def get(self, path: str, model: type[M]) -> M:
        """GET ``path`` and decode the body into ``model``."""
        return self._request("GET", path, model)

    def post(self, path: str, params: BaseModel | dict[str, Any] | None, model: type[M]) -> M:
        """POST ``params`` to ``path`` and decode the body into ``model``."""
        return self._request("POST", path, model, params=params)

    def delete(self, path: str, model: type[M]) -> M:
        """DELETE ``path`` and decode the body into ``model``.

        Parameters for DELETE travel in the query string already present in
        ``path``.
        """
        return self._request("DELETE", path, model)

    def _request(
        self,
        method: str,
        path: str,
        model: type[M],
        params: BaseModel | dict[str, Any] | None = None,
    ) -> M:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path relative to the base URL (e.g., /subscriptions)
            model: Resource model the response body is validated into
            params: Body parameters for POST

        Returns:
            The decoded resource

        Raises:
            PaymentAPIError: On any failure
        """
        headers = self._headers()
        request_kwargs: dict[str, Any] = {}

        # Encode before touching the network
        if method == "POST":
            if self.body_encoding == BodyEncoding.JSON:
                headers["Content-Type"] = "application/json"
                request_kwargs["content"] = to_json(params)
            else:
                headers["Content-Type"] = "application/x-www-form-urlencoded"
                request_kwargs["content"] = to_query_string(params)

        client = self._get_client()
        logger.debug("Sending API request", method=method, path=path)

        try:
            response = client.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                **request_kwargs,
            )
        except httpx.TimeoutException as e:
            logger.error("API request timeout", method=method, path=path, error=str(e))
            raise PaymentAPIError(
                f"Request timeout: {path}", ErrorKind.TIMEOUT, context={"path": path}
            ) from e
        except httpx.RequestError as e:
            logger.error("API request error", method=method, path=path, error=str(e))
            raise PaymentAPIError(
                f"Request failed: {str(e)}", ErrorKind.NETWORK, context={"path": path}
            ) from e

        logger.debug(
            "Received API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return self._handle_response(response, path, model)

    def _handle_response(self, response: httpx.Response, path: str, model: type[M]) -> M:
        try:
            body = response.json()
        except ValueError as e:
            if response.is_error:
                body = response.text
            else:
                logger.error("API response is not JSON", path=path, status_code=response.status_code)
                raise PaymentAPIError(
                    "Response body is not valid JSON",
                    ErrorKind.DESERIALIZATION,
                    status_code=response.status_code,
                    context={"path": path},
                ) from e

        if response.is_error:
            error = PaymentAPIError.from_response_body(response.status_code, body, path=path)
            logger.warning(
                "API returned an error",
                path=path,
                status_code=response.status_code,
                error_type=error.error_type,
                error_code=error.error_code,
            )
            raise error

        try:
            return model.model_validate(body)
        except ValidationError as e:
            logger.error(
                "Failed to decode API response",
                path=path,
                model=model.__name__,
                errors=e.error_count(),
            )
            raise PaymentAPIError(
                f"Failed to decode {model.__name__}: {e}",
                ErrorKind.DESERIALIZATION,
                status_code=response.status_code,
                context={"path": path},
            ) from e
