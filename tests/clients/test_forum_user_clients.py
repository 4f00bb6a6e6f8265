"""Tests for ForumApiClient, UserApiClient and the feature toggles."""

import httpx
import pytest
import respx

from malapi.auth.credentials import Credentials
from malapi.clients.forum import ForumApiClient
from malapi.clients.user import UserApiClient
from malapi.errors import AuthenticationRequiredError, FeatureDisabledError
from malapi.queries.forum import GetForumTopicDetail, GetForumTopics
from malapi.queries.user import GetUserInformation

BASE = "https://api.myanimelist.net/v2"


@pytest.mark.asyncio
async def test_get_forum_boards(respx_mock: respx.MockRouter, load_fixture) -> None:
    respx_mock.get(f"{BASE}/forum/boards").mock(
        return_value=httpx.Response(200, json=load_fixture("forum_boards.json"))
    )
    client = ForumApiClient(Credentials.from_client_id("cid"))
    boards = await client.get_forum_boards()
    assert boards.categories[0].title == "MyAnimeList"


@pytest.mark.asyncio
async def test_get_forum_topic_detail(respx_mock: respx.MockRouter, load_fixture) -> None:
    respx_mock.get(f"{BASE}/forum/topic/481").mock(
        return_value=httpx.Response(200, json=load_fixture("forum_topic_detail.json"))
    )
    client = ForumApiClient(Credentials.from_client_id("cid"))
    detail = await client.get_forum_topic_detail(GetForumTopicDetail(481).limit(1).build())
    assert detail.data.posts[0].number == 1


@pytest.mark.asyncio
async def test_get_forum_topics(respx_mock: respx.MockRouter, load_fixture) -> None:
    route = respx_mock.get(f"{BASE}/forum/topics").mock(
        return_value=httpx.Response(200, json=load_fixture("forum_topics.json"))
    )
    client = ForumApiClient(Credentials.from_client_id("cid"))
    topics = await client.get_forum_topics(GetForumTopics().q("welcome").build())
    assert topics.data[0].id == 481
    assert route.calls.last.request.url.params["q"] == "welcome"


@pytest.mark.asyncio
async def test_user_information(respx_mock: respx.MockRouter, load_fixture) -> None:
    route = respx_mock.get(f"{BASE}/users/@me").mock(
        return_value=httpx.Response(200, json=load_fixture("user.json"))
    )
    client = UserApiClient(Credentials.from_token("token"))
    user = await client.get_my_user_information(
        GetUserInformation().fields("anime_statistics").build()
    )
    assert user.id == 4592783
    assert route.calls.last.request.url.params["fields"] == "anime_statistics"


@pytest.mark.asyncio
async def test_user_information_requires_token(respx_mock: respx.MockRouter) -> None:
    """Failure: the user endpoint rejects client-ID-only credentials up front."""
    client = UserApiClient(Credentials.from_client_id("cid"))
    with pytest.raises(AuthenticationRequiredError):
        await client.get_my_user_information(GetUserInformation().build())
    assert not respx_mock.calls


def test_forum_disabled_by_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MALAPI_FEATURES_FORUM", "0")
    with pytest.raises(FeatureDisabledError):
        ForumApiClient(Credentials.from_client_id("cid"))


def test_user_disabled_by_config(isolated_env) -> None:
    isolated_env.mkdir(parents=True, exist_ok=True)
    (isolated_env / "config.toml").write_text("[features]\nuser = false\n")
    with pytest.raises(FeatureDisabledError):
        UserApiClient(Credentials.from_token("token"))
    # Forum stays enabled.
    ForumApiClient(Credentials.from_client_id("cid"))
