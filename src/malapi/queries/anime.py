"""Query builders for the anime and user animelist endpoints.

Example:
    >>> query = GetAnimeList("One").fields("id", "title").limit(5).build()
    >>> to_query_string(query)
    'q=One&fields=id,title&limit=5'
"""

from collections.abc import Iterable

from malapi.errors import InvalidArgumentError, OutOfRangeError
from malapi.fields import ANIME_DETAIL_FIELDS, ANIME_FIELDS, ResourceType
from malapi.models.enums import (
    AnimeRankingType,
    Season,
    SeasonalAnimeSort,
    UserAnimeListSort,
    UserAnimeListStatus,
)
from malapi.queries.base import (
    PAGE_OFFSET,
    Endpoint,
    FieldsMixin,
    NsfwMixin,
    PagingMixin,
    QueryBuilder,
    coerce_enum,
    require_bool,
    require_id,
    require_int,
    require_text,
)

_LIST_PARAMS = ("fields", "limit", "offset", "nsfw")
# Earliest season with entries on MyAnimeList.
FIRST_SEASON_YEAR = 1917


class GetAnimeList(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """Search anime by title. Limit must be within ``[1, 100]``."""

    ENDPOINT = Endpoint.ANIME_LIST
    RESOURCE = ResourceType.ANIME
    PATH = "anime"
    PARAMS = ("q", *_LIST_PARAMS)
    ALLOWED_FIELDS = ANIME_FIELDS
    BOUNDS = {"limit": (1, 100), "offset": PAGE_OFFSET}

    def __init__(self, q: str) -> None:
        super().__init__()
        self._set("q", require_text("q", q))

    def q(self, value: str) -> "GetAnimeList":
        """Replace the search text."""
        return self._set("q", require_text("q", value))


class GetAnimeDetails(FieldsMixin, QueryBuilder):
    """Fetch a single anime. Accepts the detail-only fields too."""

    ENDPOINT = Endpoint.ANIME_DETAILS
    RESOURCE = ResourceType.ANIME
    PATH = "anime/{anime_id}"
    PARAMS = ("fields",)
    ALLOWED_FIELDS = ANIME_DETAIL_FIELDS

    def __init__(self, anime_id: int) -> None:
        super().__init__(anime_id=require_id("anime_id", anime_id))


class GetAnimeRanking(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """Anime ranking. Limit must be within ``[1, 500]``."""

    ENDPOINT = Endpoint.ANIME_RANKING
    RESOURCE = ResourceType.ANIME
    PATH = "anime/ranking"
    PARAMS = ("ranking_type", *_LIST_PARAMS)
    ALLOWED_FIELDS = ANIME_FIELDS
    BOUNDS = {"limit": (1, 500), "offset": PAGE_OFFSET}

    def __init__(self, ranking_type: AnimeRankingType | str = AnimeRankingType.ALL) -> None:
        super().__init__()
        self._set(
            "ranking_type", coerce_enum(AnimeRankingType, "ranking_type", ranking_type)
        )


class GetSeasonalAnime(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """Anime airing in a given season. Limit must be within ``[1, 500]``.

    The year must be at least ``FIRST_SEASON_YEAR``.
    """

    ENDPOINT = Endpoint.SEASONAL_ANIME
    RESOURCE = ResourceType.ANIME
    PATH = "anime/season/{year}/{season}"
    PARAMS = ("sort", *_LIST_PARAMS)
    ALLOWED_FIELDS = ANIME_FIELDS
    BOUNDS = {"limit": (1, 500), "offset": PAGE_OFFSET}

    def __init__(self, year: int, season: Season | str) -> None:
        year = require_int("year", year)
        if year < FIRST_SEASON_YEAR:
            raise OutOfRangeError("year", year, FIRST_SEASON_YEAR)
        season = coerce_enum(Season, "season", season)
        super().__init__(year=year, season=season.value)

    def sort(self, value: SeasonalAnimeSort | str) -> "GetSeasonalAnime":
        return self._set("sort", coerce_enum(SeasonalAnimeSort, "sort", value))


class GetSuggestedAnime(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """Anime suggestions for the authenticated user. Limit within ``[1, 100]``."""

    ENDPOINT = Endpoint.SUGGESTED_ANIME
    RESOURCE = ResourceType.ANIME
    PATH = "anime/suggestions"
    PARAMS = _LIST_PARAMS
    ALLOWED_FIELDS = ANIME_FIELDS
    BOUNDS = {"limit": (1, 100), "offset": PAGE_OFFSET}


class GetUserAnimeList(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """A user's anime list. Limit must be within ``[1, 1000]``.

    ``user_name`` may be ``@me`` for the authenticated user, which requires an
    OAuth2 access token.
    """

    ENDPOINT = Endpoint.USER_ANIME_LIST
    RESOURCE = ResourceType.ANIME
    PATH = "users/{user_name}/animelist"
    PARAMS = ("status", "sort", *_LIST_PARAMS)
    ALLOWED_FIELDS = ANIME_FIELDS
    BOUNDS = {"limit": (1, 1000), "offset": PAGE_OFFSET}

    def __init__(self, user_name: str) -> None:
        super().__init__(user_name=require_text("user_name", user_name))

    def status(self, value: UserAnimeListStatus | str) -> "GetUserAnimeList":
        return self._set("status", coerce_enum(UserAnimeListStatus, "status", value))

    def sort(self, value: UserAnimeListSort | str) -> "GetUserAnimeList":
        return self._set("sort", coerce_enum(UserAnimeListSort, "sort", value))


class UpdateMyAnimeListStatus(QueryBuilder):
    """Update an entry on the authenticated user's anime list.

    At least one value must be set. Score is within ``[0, 10]``, priority
    within ``[0, 2]`` and rewatch value within ``[0, 5]``.
    """

    ENDPOINT = Endpoint.UPDATE_ANIME_LIST_STATUS
    RESOURCE = ResourceType.ANIME
    PATH = "anime/{anime_id}/my_list_status"
    PARAMS = (
        "status",
        "is_rewatching",
        "score",
        "num_watched_episodes",
        "priority",
        "num_times_rewatched",
        "rewatch_value",
        "tags",
        "comments",
    )
    BOUNDS = {
        "score": (0, 10),
        "num_watched_episodes": (0, None),
        "priority": (0, 2),
        "num_times_rewatched": (0, None),
        "rewatch_value": (0, 5),
    }
    REQUIRE_ANY = PARAMS

    def __init__(self, anime_id: int) -> None:
        super().__init__(anime_id=require_id("anime_id", anime_id))

    def status(self, value: UserAnimeListStatus | str) -> "UpdateMyAnimeListStatus":
        return self._set("status", coerce_enum(UserAnimeListStatus, "status", value))

    def is_rewatching(self, value: bool = True) -> "UpdateMyAnimeListStatus":
        return self._set("is_rewatching", require_bool("is_rewatching", value))

    def score(self, value: int) -> "UpdateMyAnimeListStatus":
        return self._set("score", require_int("score", value))

    def num_watched_episodes(self, value: int) -> "UpdateMyAnimeListStatus":
        return self._set(
            "num_watched_episodes", require_int("num_watched_episodes", value)
        )

    def priority(self, value: int) -> "UpdateMyAnimeListStatus":
        return self._set("priority", require_int("priority", value))

    def num_times_rewatched(self, value: int) -> "UpdateMyAnimeListStatus":
        return self._set(
            "num_times_rewatched", require_int("num_times_rewatched", value)
        )

    def rewatch_value(self, value: int) -> "UpdateMyAnimeListStatus":
        return self._set("rewatch_value", require_int("rewatch_value", value))

    def tags(self, value: str | Iterable[str]) -> "UpdateMyAnimeListStatus":
        """Set the entry's tags, as a comma-separated string or a list."""
        tags = (value,) if isinstance(value, str) else tuple(value)
        return self._set("tags", tags)

    def comments(self, value: str) -> "UpdateMyAnimeListStatus":
        if not isinstance(value, str):
            raise InvalidArgumentError("comments must be a string")
        return self._set("comments", value)


class DeleteMyAnimeListItem(QueryBuilder):
    """Remove an anime from the authenticated user's list."""

    ENDPOINT = Endpoint.DELETE_ANIME_LIST_ITEM
    RESOURCE = ResourceType.ANIME
    PATH = "anime/{anime_id}/my_list_status"

    def __init__(self, anime_id: int) -> None:
        super().__init__(anime_id=require_id("anime_id", anime_id))
