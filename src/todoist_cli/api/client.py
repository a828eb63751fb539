"""HTTP client for the Todoist REST API."""

from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from todoist_cli.config import DEFAULT_ENDPOINT, get_config_manager
from todoist_cli.errors import DecodeError, RequestFailed, TransportError
from todoist_cli.utils.logger import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)


class APIClient:
    """Authenticated transport for the REST API.

    Every call is a single round trip: there is no retry, and timeouts are
    whatever the underlying ``httpx.AsyncClient`` is configured with.

    Args:
        token: Todoist API token, sent as a bearer token.
        base_url: REST root every path is appended to.
        timeout: Request timeout in seconds (httpx default when omitted).
        http_client: Pre-built client to use instead of creating one.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_ENDPOINT,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._client = http_client
        self._owns_client = http_client is None

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers with authentication."""
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            kwargs: dict[str, Any] = {"follow_redirects": True}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Only connection-level failures are raised here; status handling is
        left to the caller. Query values in ``params`` are percent-encoded,
        so characters such as ``&`` and ``#`` reach the server intact.
        """
        url = self.base_url + (path if path.startswith("/") else f"/{path}")
        client = self._get_client()
        try:
            response = await client.request(
                method,
                url,
                headers=self._get_headers(),
                json=json,
                params=params,
            )
        except httpx.RequestError as e:
            get_logger().warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"Could not reach {self.base_url}: {e}") from e

        get_logger().debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.is_success:
            raise DecodeError(
                f"Unexpected response from server (status {response.status_code})",
                status=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                "Server returned a body that is not valid JSON",
                status=response.status_code,
            ) from e

    async def get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        """Make a GET request and return the decoded JSON body."""
        response = await self.request("GET", path, params=params)
        return self._decode(response)

    async def post(
        self,
        path: str,
        body: Optional[Any] = None,
        *,
        decode: bool = True,
    ) -> Any:
        """Make a POST request.

        ``body`` is serialised as JSON only when given; ``None`` sends no body.
        With ``decode=False`` the response body is ignored and a non-success
        status raises :class:`RequestFailed`.
        """
        response = await self.request("POST", path, json=body)
        if not decode:
            if not response.is_success:
                raise RequestFailed(response.status_code)
            return None
        return self._decode(response)


def decode_model(model: type[ModelT], data: Any) -> ModelT:
    """Validate one decoded JSON object into ``model``."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Server returned a malformed {model.__name__.lower()}: "
            f"{e.error_count()} validation error(s)"
        ) from e


def decode_models(model: type[ModelT], data: Any) -> list[ModelT]:
    """Validate a decoded JSON array into a list of ``model``."""
    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a list of {model.__name__.lower()}s, got {type(data).__name__}"
        )
    return [decode_model(model, item) for item in data]


def get_client() -> APIClient:
    """Build an API client from the loaded configuration."""
    config = get_config_manager().config
    return APIClient(config.api_key, base_url=config.endpoint, timeout=config.timeout)
