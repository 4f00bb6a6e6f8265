"""Typed, validated query builders for every MyAnimeList endpoint."""

from malapi.queries.anime import (
    DeleteMyAnimeListItem,
    GetAnimeDetails,
    GetAnimeList,
    GetAnimeRanking,
    GetSeasonalAnime,
    GetSuggestedAnime,
    GetUserAnimeList,
    UpdateMyAnimeListStatus,
)
from malapi.queries.base import Endpoint, Query, QueryBuilder
from malapi.queries.forum import GetForumTopicDetail, GetForumTopics
from malapi.queries.manga import (
    DeleteMyMangaListItem,
    GetMangaDetails,
    GetMangaList,
    GetMangaRanking,
    GetUserMangaList,
    UpdateMyMangaListStatus,
)
from malapi.queries.serialize import serialize, to_query_string
from malapi.queries.user import GetUserInformation

__all__ = [
    "DeleteMyAnimeListItem",
    "DeleteMyMangaListItem",
    "Endpoint",
    "GetAnimeDetails",
    "GetAnimeList",
    "GetAnimeRanking",
    "GetForumTopicDetail",
    "GetForumTopics",
    "GetMangaDetails",
    "GetMangaList",
    "GetMangaRanking",
    "GetSeasonalAnime",
    "GetSuggestedAnime",
    "GetUserAnimeList",
    "GetUserInformation",
    "GetUserMangaList",
    "Query",
    "QueryBuilder",
    "UpdateMyAnimeListStatus",
    "UpdateMyMangaListStatus",
    "serialize",
    "to_query_string",
]
