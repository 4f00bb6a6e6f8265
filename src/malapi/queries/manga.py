"""Query builders for the manga and user mangalist endpoints."""

from collections.abc import Iterable

from malapi.errors import InvalidArgumentError
from malapi.fields import MANGA_DETAIL_FIELDS, MANGA_FIELDS, ResourceType
from malapi.models.enums import MangaRankingType, UserMangaListSort, UserMangaListStatus
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


class GetMangaList(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """Search manga by title. Limit must be within ``[1, 100]``."""

    ENDPOINT = Endpoint.MANGA_LIST
    RESOURCE = ResourceType.MANGA
    PATH = "manga"
    PARAMS = ("q", *_LIST_PARAMS)
    ALLOWED_FIELDS = MANGA_FIELDS
    BOUNDS = {"limit": (1, 100), "offset": PAGE_OFFSET}

    def __init__(self, q: str) -> None:
        super().__init__()
        self._set("q", require_text("q", q))

    def q(self, value: str) -> "GetMangaList":
        return self._set("q", require_text("q", value))


class GetMangaDetails(FieldsMixin, QueryBuilder):
    """Fetch a single manga. Accepts the detail-only fields too."""

    ENDPOINT = Endpoint.MANGA_DETAILS
    RESOURCE = ResourceType.MANGA
    PATH = "manga/{manga_id}"
    PARAMS = ("fields",)
    ALLOWED_FIELDS = MANGA_DETAIL_FIELDS

    def __init__(self, manga_id: int) -> None:
        super().__init__(manga_id=require_id("manga_id", manga_id))


class GetMangaRanking(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """Manga ranking. Limit must be within ``[1, 500]``."""

    ENDPOINT = Endpoint.MANGA_RANKING
    RESOURCE = ResourceType.MANGA
    PATH = "manga/ranking"
    PARAMS = ("ranking_type", *_LIST_PARAMS)
    ALLOWED_FIELDS = MANGA_FIELDS
    BOUNDS = {"limit": (1, 500), "offset": PAGE_OFFSET}

    def __init__(self, ranking_type: MangaRankingType | str = MangaRankingType.ALL) -> None:
        super().__init__()
        self._set(
            "ranking_type", coerce_enum(MangaRankingType, "ranking_type", ranking_type)
        )


class GetUserMangaList(FieldsMixin, PagingMixin, NsfwMixin, QueryBuilder):
    """A user's manga list. Limit must be within ``[1, 1000]``.

    ``user_name`` may be ``@me`` for the authenticated user.
    """

    ENDPOINT = Endpoint.USER_MANGA_LIST
    RESOURCE = ResourceType.MANGA
    PATH = "users/{user_name}/mangalist"
    PARAMS = ("status", "sort", *_LIST_PARAMS)
    ALLOWED_FIELDS = MANGA_FIELDS
    BOUNDS = {"limit": (1, 1000), "offset": PAGE_OFFSET}

    def __init__(self, user_name: str) -> None:
        super().__init__(user_name=require_text("user_name", user_name))

    def status(self, value: UserMangaListStatus | str) -> "GetUserMangaList":
        return self._set("status", coerce_enum(UserMangaListStatus, "status", value))

    def sort(self, value: UserMangaListSort | str) -> "GetUserMangaList":
        return self._set("sort", coerce_enum(UserMangaListSort, "sort", value))


class UpdateMyMangaListStatus(QueryBuilder):
    """Update an entry on the authenticated user's manga list.

    At least one value must be set. Score is within ``[0, 10]``, priority
    within ``[0, 2]`` and reread value within ``[0, 5]``.
    """

    ENDPOINT = Endpoint.UPDATE_MANGA_LIST_STATUS
    RESOURCE = ResourceType.MANGA
    PATH = "manga/{manga_id}/my_list_status"
    PARAMS = (
        "status",
        "is_rereading",
        "score",
        "num_volumes_read",
        "num_chapters_read",
        "priority",
        "num_times_reread",
        "reread_value",
        "tags",
        "comments",
    )
    BOUNDS = {
        "score": (0, 10),
        "num_volumes_read": (0, None),
        "num_chapters_read": (0, None),
        "priority": (0, 2),
        "num_times_reread": (0, None),
        "reread_value": (0, 5),
    }
    REQUIRE_ANY = PARAMS

    def __init__(self, manga_id: int) -> None:
        super().__init__(manga_id=require_id("manga_id", manga_id))

    def status(self, value: UserMangaListStatus | str) -> "UpdateMyMangaListStatus":
        return self._set("status", coerce_enum(UserMangaListStatus, "status", value))

    def is_rereading(self, value: bool = True) -> "UpdateMyMangaListStatus":
        return self._set("is_rereading", require_bool("is_rereading", value))

    def score(self, value: int) -> "UpdateMyMangaListStatus":
        return self._set("score", require_int("score", value))

    def num_volumes_read(self, value: int) -> "UpdateMyMangaListStatus":
        return self._set("num_volumes_read", require_int("num_volumes_read", value))

    def num_chapters_read(self, value: int) -> "UpdateMyMangaListStatus":
        return self._set("num_chapters_read", require_int("num_chapters_read", value))

    def priority(self, value: int) -> "UpdateMyMangaListStatus":
        return self._set("priority", require_int("priority", value))

    def num_times_reread(self, value: int) -> "UpdateMyMangaListStatus":
        return self._set("num_times_reread", require_int("num_times_reread", value))

    def reread_value(self, value: int) -> "UpdateMyMangaListStatus":
        return self._set("reread_value", require_int("reread_value", value))

    def tags(self, value: str | Iterable[str]) -> "UpdateMyMangaListStatus":
        tags = (value,) if isinstance(value, str) else tuple(value)
        return self._set("tags", tags)

    def comments(self, value: str) -> "UpdateMyMangaListStatus":
        if not isinstance(value, str):
            raise InvalidArgumentError("comments must be a string")
        return self._set("comments", value)


class DeleteMyMangaListItem(QueryBuilder):
    """Remove a manga from the authenticated user's list."""

    ENDPOINT = Endpoint.DELETE_MANGA_LIST_ITEM
    RESOURCE = ResourceType.MANGA
    PATH = "manga/{manga_id}/my_list_status"

    def __init__(self, manga_id: int) -> None:
        super().__init__(manga_id=require_id("manga_id", manga_id))
