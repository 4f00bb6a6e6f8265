"""Field enumerations for the MyAnimeList ``fields`` query parameter.

Each resource type has a closed set of field names that may be requested.
List-style endpoints accept the "common" fields; detail endpoints accept the
common fields plus a handful of detail-only fields.

Design:
- Field enums are ``str`` enums so members and plain strings can be mixed
  freely when building a FieldSet.
- FieldSet does not validate on its own. Builders validate the tokens against
  their endpoint's allowed set at ``build()`` time.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class ResourceType(str, Enum):
    """MyAnimeList entity categories an endpoint operates on."""

    ANIME = "anime"
    MANGA = "manga"
    FORUM = "forum"
    USER = "user"


class AnimeField(str, Enum):
    """Fields accepted by every anime endpoint."""

    ID = "id"
    TITLE = "title"
    MAIN_PICTURE = "main_picture"
    ALTERNATIVE_TITLES = "alternative_titles"
    START_DATE = "start_date"
    END_DATE = "end_date"
    SYNOPSIS = "synopsis"
    MEAN = "mean"
    RANK = "rank"
    POPULARITY = "popularity"
    NUM_LIST_USERS = "num_list_users"
    NUM_SCORING_USERS = "num_scoring_users"
    NSFW = "nsfw"
    GENRES = "genres"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    MEDIA_TYPE = "media_type"
    STATUS = "status"
    MY_LIST_STATUS = "my_list_status"
    NUM_EPISODES = "num_episodes"
    START_SEASON = "start_season"
    BROADCAST = "broadcast"
    SOURCE = "source"
    AVERAGE_EPISODE_DURATION = "average_episode_duration"
    RATING = "rating"
    STUDIOS = "studios"


class AnimeDetailField(str, Enum):
    """Fields only accepted by the anime details endpoint."""

    PICTURES = "pictures"
    BACKGROUND = "background"
    RELATED_ANIME = "related_anime"
    RELATED_MANGA = "related_manga"
    RECOMMENDATIONS = "recommendations"
    STATISTICS = "statistics"


class MangaField(str, Enum):
    """Fields accepted by every manga endpoint."""

    ID = "id"
    TITLE = "title"
    MAIN_PICTURE = "main_picture"
    ALTERNATIVE_TITLES = "alternative_titles"
    START_DATE = "start_date"
    END_DATE = "end_date"
    SYNOPSIS = "synopsis"
    MEAN = "mean"
    RANK = "rank"
    POPULARITY = "popularity"
    NUM_LIST_USERS = "num_list_users"
    NUM_SCORING_USERS = "num_scoring_users"
    NSFW = "nsfw"
    GENRES = "genres"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    MEDIA_TYPE = "media_type"
    STATUS = "status"
    MY_LIST_STATUS = "my_list_status"
    NUM_VOLUMES = "num_volumes"
    NUM_CHAPTERS = "num_chapters"
    AUTHORS = "authors"


class MangaDetailField(str, Enum):
    """Fields only accepted by the manga details endpoint."""

    PICTURES = "pictures"
    BACKGROUND = "background"
    RELATED_ANIME = "related_anime"
    RELATED_MANGA = "related_manga"
    RECOMMENDATIONS = "recommendations"
    SERIALIZATION = "serialization"


class UserField(str, Enum):
    """Fields accepted by the user information endpoint."""

    ID = "id"
    NAME = "name"
    PICTURE = "picture"
    GENDER = "gender"
    BIRTHDAY = "birthday"
    LOCATION = "location"
    JOINED_AT = "joined_at"
    ANIME_STATISTICS = "anime_statistics"
    TIME_ZONE = "time_zone"
    IS_SUPPORTER = "is_supporter"


ANIME_FIELDS: frozenset[str] = frozenset(f.value for f in AnimeField)
ANIME_DETAIL_FIELDS: frozenset[str] = ANIME_FIELDS | {
    f.value for f in AnimeDetailField
}
MANGA_FIELDS: frozenset[str] = frozenset(f.value for f in MangaField)
MANGA_DETAIL_FIELDS: frozenset[str] = MANGA_FIELDS | {
    f.value for f in MangaDetailField
}
USER_FIELDS: frozenset[str] = frozenset(f.value for f in UserField)
# Forum endpoints take no ``fields`` parameter.
FORUM_FIELDS: frozenset[str] = frozenset()


def _token(field: "str | Enum") -> str:
    if isinstance(field, Enum):
        return str(field.value)
    if isinstance(field, str):
        return field
    raise TypeError(f"Field must be a string or field enum, got {type(field)!r}")


@dataclass(frozen=True)
class FieldSet:
    """Ordered set of field tokens rendered as a comma-joined string.

    Duplicates collapse while the first-seen order is kept, so the same
    fields always render identically.
    """

    tokens: tuple[str, ...] = ()

    @classmethod
    def of(cls, *fields: "str | Enum") -> "FieldSet":
        """Create a FieldSet from field enum members or plain strings."""
        return cls.from_iterable(fields)

    @classmethod
    def from_iterable(cls, fields: Iterable["str | Enum"]) -> "FieldSet":
        """Create a FieldSet from any iterable of fields."""
        return cls(tuple(dict.fromkeys(_token(f) for f in fields)))

    def render(self) -> str:
        """Return the comma-joined ``fields`` parameter value."""
        return ",".join(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, field: object) -> bool:
        if isinstance(field, (str, Enum)):
            return _token(field) in self.tokens
        return False

    def __str__(self) -> str:
        return self.render()


def all_anime_fields() -> FieldSet:
    """Return every anime common field."""
    return FieldSet.from_iterable(AnimeField)


def all_anime_detail_fields() -> FieldSet:
    """Return every field accepted by the anime details endpoint."""
    return FieldSet.from_iterable([*AnimeField, *AnimeDetailField])


def all_manga_fields() -> FieldSet:
    """Return every manga common field."""
    return FieldSet.from_iterable(MangaField)


def all_manga_detail_fields() -> FieldSet:
    """Return every field accepted by the manga details endpoint."""
    return FieldSet.from_iterable([*MangaField, *MangaDetailField])


def all_user_fields() -> FieldSet:
    """Return every user field."""
    return FieldSet.from_iterable(UserField)
