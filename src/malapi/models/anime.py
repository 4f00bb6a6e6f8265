"""Response models for the anime and user animelist endpoints."""

from typing import Annotated

from pydantic import Field

from malapi.models.common import (
    AlternativeTitles,
    Genre,
    MalModel,
    NsfwValue,
    PagedResponse,
    Picture,
    Ranking,
    RelationTypeValue,
)
from malapi.models.enums import (
    AnimeMediaType,
    AnimeRating,
    AnimeSource,
    AnimeStatus,
    Season,
    UserAnimeListStatus,
)

AnimeMediaTypeValue = Annotated[AnimeMediaType | str, Field(union_mode="left_to_right")]
AnimeStatusValue = Annotated[AnimeStatus | str, Field(union_mode="left_to_right")]
AnimeSourceValue = Annotated[AnimeSource | str, Field(union_mode="left_to_right")]
AnimeRatingValue = Annotated[AnimeRating | str, Field(union_mode="left_to_right")]
ListStatusValue = Annotated[
    UserAnimeListStatus | str, Field(union_mode="left_to_right")
]


class AnimeListStatus(MalModel):
    """An anime's status on a user's list.

    Returned inside list entries, as ``my_list_status`` and by the update
    endpoint.
    """

    status: ListStatusValue | None = None
    score: int = 0
    num_episodes_watched: int = 0
    is_rewatching: bool = False
    start_date: str | None = None
    finish_date: str | None = None
    priority: int = 0
    num_times_rewatched: int = 0
    rewatch_value: int = 0
    tags: list[str] = Field(default_factory=list)
    comments: str = ""
    updated_at: str | None = None


class StartSeason(MalModel):
    """Season an anime started airing in."""

    year: int
    season: Annotated[Season | str, Field(union_mode="left_to_right")]


class Broadcast(MalModel):
    """Weekly broadcast slot."""

    day_of_the_week: str
    start_time: str | None = None


class Studio(MalModel):
    """Animation studio."""

    id: int
    name: str


class Anime(MalModel):
    """Anime node. Only ``id`` is guaranteed; the rest depends on ``fields``."""

    id: int
    title: str | None = None
    main_picture: Picture | None = None
    alternative_titles: AlternativeTitles | None = None
    start_date: str | None = None
    end_date: str | None = None
    synopsis: str | None = None
    mean: float | None = None
    rank: int | None = None
    popularity: int | None = None
    num_list_users: int | None = None
    num_scoring_users: int | None = None
    nsfw: NsfwValue | None = None
    genres: list[Genre] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    media_type: AnimeMediaTypeValue | None = None
    status: AnimeStatusValue | None = None
    my_list_status: AnimeListStatus | None = None
    num_episodes: int | None = None
    start_season: StartSeason | None = None
    broadcast: Broadcast | None = None
    source: AnimeSourceValue | None = None
    average_episode_duration: int | None = None
    rating: AnimeRatingValue | None = None
    studios: list[Studio] | None = None


class RelatedAnime(MalModel):
    """An anime related to the current entry."""

    node: Anime
    relation_type: RelationTypeValue
    relation_type_formatted: str | None = None


class AnimeRecommendation(MalModel):
    """An anime recommended by users alongside the current entry."""

    node: Anime
    num_recommendations: int


class StatisticsStatus(MalModel):
    """List counts per status. MAL sends these as strings."""

    watching: int = 0
    completed: int = 0
    on_hold: int = 0
    dropped: int = 0
    plan_to_watch: int = 0


class Statistics(MalModel):
    """Aggregate list statistics for an anime."""

    num_list_users: int
    status: StatisticsStatus


class AnimeDetails(Anime):
    """Full anime details, including detail-only fields."""

    pictures: list[Picture] | None = None
    background: str | None = None
    related_anime: list[RelatedAnime] | None = None
    # Imported lazily below to avoid the anime <-> manga import cycle.
    related_manga: list["RelatedManga"] | None = None
    recommendations: list[AnimeRecommendation] | None = None
    statistics: Statistics | None = None


class AnimeListEntry(MalModel):
    """Entry in an anime list; ``list_status`` is only set for user lists."""

    node: Anime
    list_status: AnimeListStatus | None = None


class AnimeList(PagedResponse):
    """Response of the anime search and user animelist endpoints."""

    data: list[AnimeListEntry] = Field(default_factory=list)


class AnimeRankingEntry(MalModel):
    """Entry in an anime ranking."""

    node: Anime
    ranking: Ranking


class AnimeRanking(PagedResponse):
    """Response of the anime ranking endpoint."""

    data: list[AnimeRankingEntry] = Field(default_factory=list)


class AnimeNode(MalModel):
    """Entry that only wraps an anime node."""

    node: Anime


class SeasonalAnime(PagedResponse):
    """Response of the seasonal anime endpoint."""

    data: list[AnimeNode] = Field(default_factory=list)
    season: StartSeason | None = None


class SuggestedAnime(PagedResponse):
    """Response of the suggested anime endpoint."""

    data: list[AnimeNode] = Field(default_factory=list)


from malapi.models.manga import RelatedManga  # noqa: E402

AnimeDetails.model_rebuild()
