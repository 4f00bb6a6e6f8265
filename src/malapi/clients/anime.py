"""Client for the anime endpoints."""

from malapi.clients.base import BaseApiClient
from malapi.models.anime import (
    AnimeDetails,
    AnimeList,
    AnimeListStatus,
    AnimeRanking,
    SeasonalAnime,
    SuggestedAnime,
)
from malapi.queries.base import Endpoint, Query


class AnimeApiClient(BaseApiClient):
    """Anime search, details, ranking, seasons, suggestions and list updates."""

    async def get_anime_list(self, query: Query) -> AnimeList:
        self._check(query, Endpoint.ANIME_LIST)
        return await self._get(query, AnimeList)

    async def get_anime_details(self, query: Query) -> AnimeDetails:
        self._check(query, Endpoint.ANIME_DETAILS)
        return await self._get(query, AnimeDetails)

    async def get_anime_ranking(self, query: Query) -> AnimeRanking:
        self._check(query, Endpoint.ANIME_RANKING)
        return await self._get(query, AnimeRanking)

    async def get_seasonal_anime(self, query: Query) -> SeasonalAnime:
        self._check(query, Endpoint.SEASONAL_ANIME)
        return await self._get(query, SeasonalAnime)

    async def get_suggested_anime(self, query: Query) -> SuggestedAnime:
        """Suggestions for the authenticated user. Requires an access token."""
        self._check(query, Endpoint.SUGGESTED_ANIME)
        self.credentials.require_token("get_suggested_anime")
        return await self._get(query, SuggestedAnime)

    async def get_user_anime_list(self, query: Query) -> AnimeList:
        """A user's anime list. ``@me`` requires an access token."""
        self._check(query, Endpoint.USER_ANIME_LIST)
        self._require_token_for_me(query)
        return await self._get(query, AnimeList)

    async def update_anime_list_status(self, query: Query) -> AnimeListStatus:
        """Add or update an anime on the user's list and return its new status."""
        self._check(query, Endpoint.UPDATE_ANIME_LIST_STATUS)
        self.credentials.require_token("update_anime_list_status")
        return await self._patch(query, AnimeListStatus)

    async def delete_anime_list_item(self, query: Query) -> None:
        self._check(query, Endpoint.DELETE_ANIME_LIST_ITEM)
        self.credentials.require_token("delete_anime_list_item")
        await self._delete(query)
