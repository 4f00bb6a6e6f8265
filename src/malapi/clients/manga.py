"""Client for the manga endpoints."""

from malapi.clients.base import BaseApiClient
from malapi.models.manga import MangaDetails, MangaList, MangaListStatus, MangaRanking
from malapi.queries.base import Endpoint, Query


class MangaApiClient(BaseApiClient):
    """Manga search, details, ranking and list updates."""

    async def get_manga_list(self, query: Query) -> MangaList:
        self._check(query, Endpoint.MANGA_LIST)
        return await self._get(query, MangaList)

    async def get_manga_details(self, query: Query) -> MangaDetails:
        self._check(query, Endpoint.MANGA_DETAILS)
        return await self._get(query, MangaDetails)

    async def get_manga_ranking(self, query: Query) -> MangaRanking:
        self._check(query, Endpoint.MANGA_RANKING)
        return await self._get(query, MangaRanking)

    async def get_user_manga_list(self, query: Query) -> MangaList:
        self._check(query, Endpoint.USER_MANGA_LIST)
        self._require_token_for_me(query)
        return await self._get(query, MangaList)

    async def update_manga_list_status(self, query: Query) -> MangaListStatus:
        self._check(query, Endpoint.UPDATE_MANGA_LIST_STATUS)
        self.credentials.require_token("update_manga_list_status")
        return await self._patch(query, MangaListStatus)

    async def delete_manga_list_item(self, query: Query) -> None:
        self._check(query, Endpoint.DELETE_MANGA_LIST_ITEM)
        self.credentials.require_token("delete_manga_list_item")
        await self._delete(query)
