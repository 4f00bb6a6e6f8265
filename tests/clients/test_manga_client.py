"""Tests for MangaApiClient."""

import httpx
import pytest
import respx

from malapi.auth.credentials import Credentials
from malapi.clients.manga import MangaApiClient
from malapi.errors import AuthenticationRequiredError
from malapi.models.enums import MangaRankingType, UserMangaListStatus
from malapi.queries.manga import (
    DeleteMyMangaListItem,
    GetMangaDetails,
    GetMangaList,
    GetMangaRanking,
    GetUserMangaList,
    UpdateMyMangaListStatus,
)

BASE = "https://api.myanimelist.net/v2"


@pytest.mark.asyncio
async def test_get_manga_list(respx_mock: respx.MockRouter, load_fixture) -> None:
    """Expected: search returns typed entries with list status."""
    respx_mock.get(f"{BASE}/manga", params={"q": "One Piece"}).mock(
        return_value=httpx.Response(200, json=load_fixture("manga_list.json"))
    )
    client = MangaApiClient(Credentials.from_client_id("cid"))
    result = await client.get_manga_list(GetMangaList("One Piece").build())
    assert result.data[0].node.title == "One Piece"


@pytest.mark.asyncio
async def test_get_manga_details(respx_mock: respx.MockRouter, load_fixture) -> None:
    respx_mock.get(f"{BASE}/manga/2").mock(
        return_value=httpx.Response(200, json=load_fixture("manga_details.json"))
    )
    client = MangaApiClient(Credentials.from_client_id("cid"))
    manga = await client.get_manga_details(GetMangaDetails(2).build())
    assert manga.title == "Berserk"


@pytest.mark.asyncio
async def test_get_manga_ranking(respx_mock: respx.MockRouter) -> None:
    route = respx_mock.get(f"{BASE}/manga/ranking").mock(
        return_value=httpx.Response(
            200,
            json={"data": [{"node": {"id": 2, "title": "Berserk"}, "ranking": {"rank": 1}}]},
        )
    )
    client = MangaApiClient(Credentials.from_client_id("cid"))
    ranking = await client.get_manga_ranking(
        GetMangaRanking(MangaRankingType.MANGA).limit(1).build()
    )
    assert ranking.data[0].ranking.rank == 1
    assert route.calls.last.request.url.params["ranking_type"] == "manga"


@pytest.mark.asyncio
async def test_my_manga_list_requires_token(respx_mock: respx.MockRouter) -> None:
    client = MangaApiClient(Credentials.from_client_id("cid"))
    with pytest.raises(AuthenticationRequiredError):
        await client.get_user_manga_list(GetUserMangaList("@me").build())
    assert not respx_mock.calls


@pytest.mark.asyncio
async def test_update_and_delete_with_token(respx_mock: respx.MockRouter) -> None:
    respx_mock.patch(f"{BASE}/manga/2/my_list_status").mock(
        return_value=httpx.Response(
            200, json={"status": "reading", "num_chapters_read": 364, "score": 10}
        )
    )
    respx_mock.delete(f"{BASE}/manga/2/my_list_status").mock(
        return_value=httpx.Response(200, json=[])
    )
    client = MangaApiClient(Credentials.from_token("token"))
    status = await client.update_manga_list_status(
        UpdateMyMangaListStatus(2).status(UserMangaListStatus.READING).build()
    )
    assert status.num_chapters_read == 364
    assert await client.delete_manga_list_item(DeleteMyMangaListItem(2).build()) is None


@pytest.mark.asyncio
async def test_delete_requires_token(respx_mock: respx.MockRouter) -> None:
    client = MangaApiClient(Credentials.from_client_id("cid"))
    with pytest.raises(AuthenticationRequiredError):
        await client.delete_manga_list_item(DeleteMyMangaListItem(2).build())
    assert not respx_mock.calls
