"""Typed response models for the MyAnimeList API."""

from malapi.models.anime import (
    Anime,
    AnimeDetails,
    AnimeList,
    AnimeListStatus,
    AnimeRanking,
    SeasonalAnime,
    SuggestedAnime,
)
from malapi.models.common import MalModel, PagedResponse, Paging
from malapi.models.forum import ForumBoards, ForumTopicDetail, ForumTopics
from malapi.models.manga import (
    Manga,
    MangaDetails,
    MangaList,
    MangaListStatus,
    MangaRanking,
)
from malapi.models.user import User

__all__ = [
    "Anime",
    "AnimeDetails",
    "AnimeList",
    "AnimeListStatus",
    "AnimeRanking",
    "ForumBoards",
    "ForumTopicDetail",
    "ForumTopics",
    "MalModel",
    "Manga",
    "MangaDetails",
    "MangaList",
    "MangaListStatus",
    "MangaRanking",
    "PagedResponse",
    "Paging",
    "SeasonalAnime",
    "SuggestedAnime",
    "User",
]
