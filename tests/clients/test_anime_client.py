"""Tests for AnimeApiClient.

Covers expected, edge, and failure cases against a mocked MyAnimeList API.
"""

import httpx
import pytest
import respx

from malapi.auth.credentials import Credentials
from malapi.clients.anime import AnimeApiClient
from malapi.errors import (
    ApiError,
    AuthenticationRequiredError,
    DeserializationError,
    InvalidFieldError,
    TransportError,
)
from malapi.models.enums import Season, UserAnimeListStatus
from malapi.queries.anime import (
    DeleteMyAnimeListItem,
    GetAnimeDetails,
    GetAnimeList,
    GetSeasonalAnime,
    GetSuggestedAnime,
    GetUserAnimeList,
    UpdateMyAnimeListStatus,
)
from malapi.queries.manga import GetMangaList

BASE = "https://api.myanimelist.net/v2"


@pytest.fixture()
def client() -> AnimeApiClient:
    return AnimeApiClient(Credentials.from_client_id("test-client-id"))


@pytest.fixture()
def token_client() -> AnimeApiClient:
    return AnimeApiClient(Credentials.from_token("test-access-token"))


@pytest.mark.asyncio
class TestAnimeApiClient:
    """Tests for AnimeApiClient covering expected, edge, and failure cases."""

    async def test_get_anime_list_expected(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient, load_fixture
    ) -> None:
        """Expected: search sends the client ID header and the exact query string."""
        route = respx_mock.get(f"{BASE}/anime").mock(
            return_value=httpx.Response(200, json=load_fixture("anime_list.json"))
        )
        query = GetAnimeList("One").fields("id", "title", "num_episodes").limit(5).build()
        result = await client.get_anime_list(query)

        assert [entry.node.id for entry in result.data] == [21, 52991]
        request = route.calls.last.request
        assert request.headers["X-MAL-CLIENT-ID"] == "test-client-id"
        assert "Authorization" not in request.headers
        assert request.url.query == b"q=One&fields=id,title,num_episodes&limit=5"

    async def test_get_anime_details(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient, load_fixture
    ) -> None:
        respx_mock.get(f"{BASE}/anime/5114").mock(
            return_value=httpx.Response(200, json=load_fixture("anime_details.json"))
        )
        details = await client.get_anime_details(
            GetAnimeDetails(5114).fields("title", "statistics").build()
        )
        assert details.id == 5114
        assert details.num_episodes == 64

    async def test_get_seasonal_anime(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient, load_fixture
    ) -> None:
        respx_mock.get(f"{BASE}/anime/season/2020/fall").mock(
            return_value=httpx.Response(200, json=load_fixture("seasonal_anime.json"))
        )
        seasonal = await client.get_seasonal_anime(
            GetSeasonalAnime(2020, Season.FALL).build()
        )
        assert seasonal.data[0].node.title == "Jujutsu Kaisen"

    async def test_bearer_token_header(
        self, respx_mock: respx.MockRouter, token_client: AnimeApiClient
    ) -> None:
        route = respx_mock.get(f"{BASE}/anime/suggestions").mock(
            return_value=httpx.Response(200, json={"data": [], "paging": {}})
        )
        result = await token_client.get_suggested_anime(GetSuggestedAnime().build())
        assert result.data == []
        assert route.calls.last.request.headers["Authorization"] == (
            "Bearer test-access-token"
        )

    async def test_suggestions_require_token(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        """Failure: token-only endpoints fail before any request."""
        with pytest.raises(AuthenticationRequiredError):
            await client.get_suggested_anime(GetSuggestedAnime().build())
        assert not respx_mock.calls

    async def test_my_list_requires_token(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        with pytest.raises(AuthenticationRequiredError):
            await client.get_user_anime_list(GetUserAnimeList("@me").build())
        assert not respx_mock.calls

    async def test_other_users_list_with_client_id(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        """Edge: named users' lists only need a client ID."""
        respx_mock.get(f"{BASE}/users/someone/animelist").mock(
            return_value=httpx.Response(200, json={"data": [], "paging": {}})
        )
        result = await client.get_user_anime_list(GetUserAnimeList("someone").build())
        assert result.data == []

    async def test_update_status_sends_form_body(
        self, respx_mock: respx.MockRouter, token_client: AnimeApiClient
    ) -> None:
        route = respx_mock.patch(f"{BASE}/anime/21/my_list_status").mock(
            return_value=httpx.Response(
                200,
                json={
                    "status": "watching",
                    "score": 9,
                    "num_episodes_watched": 1000,
                    "is_rewatching": False,
                    "updated_at": "2024-01-01T00:00:00+00:00",
                },
            )
        )
        query = (
            UpdateMyAnimeListStatus(21)
            .status(UserAnimeListStatus.WATCHING)
            .score(9)
            .num_watched_episodes(1000)
            .build()
        )
        status = await token_client.update_anime_list_status(query)

        assert status.status is UserAnimeListStatus.WATCHING
        assert status.num_episodes_watched == 1000
        request = route.calls.last.request
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.content == b"status=watching&score=9&num_watched_episodes=1000"

    async def test_update_status_requires_token(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        query = UpdateMyAnimeListStatus(21).score(8).build()
        with pytest.raises(AuthenticationRequiredError):
            await client.update_anime_list_status(query)
        assert not respx_mock.calls

    async def test_delete_item(
        self, respx_mock: respx.MockRouter, token_client: AnimeApiClient
    ) -> None:
        route = respx_mock.delete(f"{BASE}/anime/21/my_list_status").mock(
            return_value=httpx.Response(200, json=[])
        )
        assert await token_client.delete_anime_list_item(DeleteMyAnimeListItem(21).build()) is None
        assert route.called

    async def test_delete_missing_item(
        self, respx_mock: respx.MockRouter, token_client: AnimeApiClient
    ) -> None:
        """Failure: MAL answers 404 when the anime is not on the list."""
        respx_mock.delete(f"{BASE}/anime/21/my_list_status").mock(
            return_value=httpx.Response(404, json={"error": "not_found", "message": ""})
        )
        with pytest.raises(ApiError) as exc_info:
            await token_client.delete_anime_list_item(DeleteMyAnimeListItem(21).build())
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "not_found"

    async def test_api_error_carries_message(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        """Failure: non-2xx responses raise ApiError with MAL's message."""
        respx_mock.get(f"{BASE}/anime").mock(
            return_value=httpx.Response(
                400, json={"message": "invalid q", "error": "bad_request"}
            )
        )
        with pytest.raises(ApiError) as exc_info:
            await client.get_anime_list(GetAnimeList("One").build())
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "invalid q"

    async def test_transport_error(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        respx_mock.get(f"{BASE}/anime").mock(side_effect=httpx.ConnectError("boom"))
        with pytest.raises(TransportError):
            await client.get_anime_list(GetAnimeList("One").build())

    async def test_malformed_body(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        """Failure: a body that does not match the model raises DeserializationError."""
        respx_mock.get(f"{BASE}/anime").mock(
            return_value=httpx.Response(200, json={"data": [{"node": {"title": "x"}}]})
        )
        with pytest.raises(DeserializationError):
            await client.get_anime_list(GetAnimeList("One").build())

    async def test_non_json_body(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        respx_mock.get(f"{BASE}/anime").mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )
        with pytest.raises(DeserializationError):
            await client.get_anime_list(GetAnimeList("One").build())

    async def test_wrong_query_type(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        with pytest.raises(TypeError):
            await client.get_anime_list(GetMangaList("Berserk").build())
        with pytest.raises(TypeError):
            await client.get_anime_list(GetAnimeList("One"))  # type: ignore[arg-type]
        assert not respx_mock.calls

    async def test_invalid_field_never_reaches_network(
        self, respx_mock: respx.MockRouter, client: AnimeApiClient
    ) -> None:
        """Failure: builder validation happens before any request."""
        with pytest.raises(InvalidFieldError):
            await client.get_anime_list(GetAnimeList("One").fields("bogus").build())
        assert not respx_mock.calls
