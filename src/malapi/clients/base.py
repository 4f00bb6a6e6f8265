"""Base class for the MyAnimeList endpoint clients.

Every client method takes one finalized :class:`~malapi.queries.base.Query`,
makes exactly one HTTP request and returns a typed response model. A new
``httpx.AsyncClient`` is opened per request, so clients hold no connection
state and can be shared freely.

Failures are mapped onto :mod:`malapi.errors` and propagate to the caller;
nothing is retried.
"""

from typing import TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from malapi.auth.credentials import Credentials
from malapi.errors import ApiError, DeserializationError, NoSuchPageError, TransportError
from malapi.models.common import MalModel, PagedResponse
from malapi.queries.base import Endpoint, Query
from malapi.queries.serialize import serialize, to_query_string
from malapi.utils.debug import debug, warn

BASE_URL = "https://api.myanimelist.net/v2"
DEFAULT_TIMEOUT = 10.0

M = TypeVar("M", bound=MalModel)
P = TypeVar("P", bound=PagedResponse)


def _error_message(resp: httpx.Response) -> str | None:
    """Extract MyAnimeList's error text from a response body, if any."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text.strip() or None
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or None
    return None


class BaseApiClient:
    """Shared request, error mapping and pagination logic."""

    BASE_URL = BASE_URL

    def __init__(self, credentials: Credentials, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            credentials: Client ID or access token used for every request.
            timeout: Per-request timeout in seconds.
        """
        self.credentials = credentials
        self.timeout = timeout

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT):  # noqa: ANN206
        """Create a client with :meth:`Credentials.from_env`."""
        return cls(Credentials.from_env(), timeout=timeout)

    @staticmethod
    def _check(query: Query, endpoint: Endpoint) -> None:
        """Raise TypeError unless *query* is a finalized query for *endpoint*."""
        if not isinstance(query, Query):
            raise TypeError(
                f"Expected a built Query for {endpoint.value}, got {type(query).__name__}"
            )
        if query.endpoint is not endpoint:
            raise TypeError(
                f"Expected a query for {endpoint.value}, got {query.endpoint.value}"
            )

    def _url(self, query: Query) -> str:
        url = f"{self.BASE_URL}/{query.path}"
        query_string = to_query_string(query)
        return f"{url}?{query_string}" if query_string else url

    async def _send(
        self, method: str, url: str, data: dict[str, str] | None = None
    ) -> httpx.Response:
        headers = self.credentials.headers()
        debug(f"{method} {url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.request(method, url, data=data, headers=headers)
        except httpx.TransportError as exc:
            warn(f"{method} {url} failed: {exc!r}")
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        if not resp.is_success:
            message = _error_message(resp)
            warn(f"{method} {url} returned HTTP {resp.status_code}: {message}")
            raise ApiError(resp.status_code, message)
        return resp

    @staticmethod
    def _parse(resp: httpx.Response, model: type[M]) -> M:
        try:
            return model.model_validate_json(resp.content)
        except PydanticValidationError as exc:
            raise DeserializationError(
                f"Unexpected {model.__name__} response: {exc}"
            ) from exc

    async def _get(self, query: Query, model: type[M]) -> M:
        resp = await self._send("GET", self._url(query))
        return self._parse(resp, model)

    async def _patch(self, query: Query, model: type[M]) -> M:
        url = f"{self.BASE_URL}/{query.path}"
        resp = await self._send("PATCH", url, data=dict(serialize(query)))
        return self._parse(resp, model)

    async def _delete(self, query: Query) -> None:
        await self._send("DELETE", f"{self.BASE_URL}/{query.path}")

    def _require_token_for_me(self, query: Query) -> None:
        if query.path.startswith("users/@me/"):
            self.credentials.require_token(f"{query.endpoint.value} for @me")

    async def next_page(self, response: P) -> P:
        """Fetch the page after *response*.

        Raises:
            NoSuchPageError: If *response* has no next link. No request is made.
        """
        url = response.paging.next
        if not url:
            raise NoSuchPageError(f"{type(response).__name__} has no next page")
        resp = await self._send("GET", url)
        return self._parse(resp, type(response))

    async def previous_page(self, response: P) -> P:
        """Fetch the page before *response*.

        Raises:
            NoSuchPageError: If *response* has no previous link. No request is made.
        """
        url = response.paging.previous
        if not url:
            raise NoSuchPageError(f"{type(response).__name__} has no previous page")
        resp = await self._send("GET", url)
        return self._parse(resp, type(response))
