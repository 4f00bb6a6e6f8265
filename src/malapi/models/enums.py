"""Enumerated values used in MyAnimeList requests and responses.

Request-side enums restrict builder arguments (ranking types, sort orders,
list statuses). Response-side enums describe values the API documents; models
fall back to the raw string when MyAnimeList returns something newer.
"""

from enum import Enum


class Season(str, Enum):
    """Anime broadcast season."""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"


class AnimeRankingType(str, Enum):
    """Ranking categories for the anime ranking endpoint."""

    ALL = "all"
    AIRING = "airing"
    UPCOMING = "upcoming"
    TV = "tv"
    OVA = "ova"
    MOVIE = "movie"
    SPECIAL = "special"
    BY_POPULARITY = "bypopularity"
    FAVORITE = "favorite"


class SeasonalAnimeSort(str, Enum):
    """Sort orders for the seasonal anime endpoint."""

    ANIME_SCORE = "anime_score"
    ANIME_NUM_LIST_USERS = "anime_num_list_users"


class UserAnimeListStatus(str, Enum):
    """Status of an entry on a user's anime list."""

    WATCHING = "watching"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"
    PLAN_TO_WATCH = "plan_to_watch"


class UserAnimeListSort(str, Enum):
    """Sort orders for a user's anime list."""

    LIST_SCORE = "list_score"
    LIST_UPDATED_AT = "list_updated_at"
    ANIME_TITLE = "anime_title"
    ANIME_START_DATE = "anime_start_date"


class MangaRankingType(str, Enum):
    """Ranking categories for the manga ranking endpoint."""

    ALL = "all"
    MANGA = "manga"
    NOVELS = "novels"
    ONESHOTS = "oneshots"
    DOUJIN = "doujin"
    MANHWA = "manhwa"
    MANHUA = "manhua"
    BY_POPULARITY = "bypopularity"
    FAVORITE = "favorite"


class UserMangaListStatus(str, Enum):
    """Status of an entry on a user's manga list."""

    READING = "reading"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"
    PLAN_TO_READ = "plan_to_read"


class UserMangaListSort(str, Enum):
    """Sort orders for a user's manga list."""

    LIST_SCORE = "list_score"
    LIST_UPDATED_AT = "list_updated_at"
    MANGA_TITLE = "manga_title"
    MANGA_START_DATE = "manga_start_date"


class ForumTopicSort(str, Enum):
    """Sort orders for forum topic search. MAL only supports ``recent``."""

    RECENT = "recent"


class Nsfw(str, Enum):
    """Content safety rating reported by MyAnimeList."""

    SFW = "white"
    MAYBE_NSFW = "gray"
    NSFW = "black"


class AnimeMediaType(str, Enum):
    """Anime media types."""

    UNKNOWN = "unknown"
    TV = "tv"
    OVA = "ova"
    MOVIE = "movie"
    SPECIAL = "special"
    ONA = "ona"
    MUSIC = "music"


class AnimeStatus(str, Enum):
    """Anime airing status."""

    FINISHED_AIRING = "finished_airing"
    CURRENTLY_AIRING = "currently_airing"
    NOT_YET_AIRED = "not_yet_aired"


class AnimeSource(str, Enum):
    """Original work an anime was adapted from."""

    OTHER = "other"
    ORIGINAL = "original"
    MANGA = "manga"
    KOMA_MANGA = "4_koma_manga"
    WEB_MANGA = "web_manga"
    DIGITAL_MANGA = "digital_manga"
    NOVEL = "novel"
    LIGHT_NOVEL = "light_novel"
    VISUAL_NOVEL = "visual_novel"
    GAME = "game"
    CARD_GAME = "card_game"
    BOOK = "book"
    PICTURE_BOOK = "picture_book"
    RADIO = "radio"
    MUSIC = "music"


class AnimeRating(str, Enum):
    """Age rating of an anime."""

    G = "g"
    PG = "pg"
    PG_13 = "pg_13"
    R = "r"
    R_PLUS = "r+"
    RX = "rx"


class MangaMediaType(str, Enum):
    """Manga media types."""

    UNKNOWN = "unknown"
    MANGA = "manga"
    NOVEL = "novel"
    ONE_SHOT = "one_shot"
    DOUJINSHI = "doujinshi"
    MANHWA = "manhwa"
    MANHUA = "manhua"
    OEL = "oel"


class MangaStatus(str, Enum):
    """Manga publishing status."""

    FINISHED = "finished"
    CURRENTLY_PUBLISHING = "currently_publishing"
    NOT_YET_PUBLISHED = "not_yet_published"
    ON_HIATUS = "on_hiatus"
    DISCONTINUED = "discontinued"


class RelationType(str, Enum):
    """How a related anime or manga relates to the current entry."""

    SEQUEL = "sequel"
    PREQUEL = "prequel"
    ALTERNATIVE_SETTING = "alternative_setting"
    ALTERNATIVE_VERSION = "alternative_version"
    SIDE_STORY = "side_story"
    PARENT_STORY = "parent_story"
    SUMMARY = "summary"
    FULL_STORY = "full_story"
    SPIN_OFF = "spin_off"
    ADAPTATION = "adaptation"
    OTHER = "other"
    # Not in the API reference but returned in practice.
    CHARACTER = "character"
