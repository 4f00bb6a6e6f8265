"""Async clients for the MyAnimeList v2 API."""

from malapi.clients.anime import AnimeApiClient
from malapi.clients.base import BASE_URL, BaseApiClient
from malapi.clients.forum import ForumApiClient
from malapi.clients.manga import MangaApiClient
from malapi.clients.user import UserApiClient

__all__ = [
    "AnimeApiClient",
    "BASE_URL",
    "BaseApiClient",
    "ForumApiClient",
    "MangaApiClient",
    "UserApiClient",
]
