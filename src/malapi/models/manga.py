"""Response models for the manga and user mangalist endpoints."""

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
from malapi.models.enums import MangaMediaType, MangaStatus, UserMangaListStatus

MangaMediaTypeValue = Annotated[MangaMediaType | str, Field(union_mode="left_to_right")]
MangaStatusValue = Annotated[MangaStatus | str, Field(union_mode="left_to_right")]
ListStatusValue = Annotated[
    UserMangaListStatus | str, Field(union_mode="left_to_right")
]


class MangaListStatus(MalModel):
    """A manga's status on a user's list."""

    status: ListStatusValue | None = None
    score: int = 0
    num_volumes_read: int = 0
    num_chapters_read: int = 0
    is_rereading: bool = False
    start_date: str | None = None
    finish_date: str | None = None
    priority: int = 0
    num_times_reread: int = 0
    reread_value: int = 0
    tags: list[str] = Field(default_factory=list)
    comments: str = ""
    updated_at: str | None = None


class AuthorDetails(MalModel):
    """A manga author."""

    id: int
    first_name: str | None = None
    last_name: str | None = None


class Author(MalModel):
    """Author credit with role (Story, Art, ...)."""

    node: AuthorDetails
    role: str | None = None


class Manga(MalModel):
    """Manga node. Only ``id`` is guaranteed; the rest depends on ``fields``."""

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
    media_type: MangaMediaTypeValue | None = None
    status: MangaStatusValue | None = None
    my_list_status: MangaListStatus | None = None
    num_volumes: int | None = None
    num_chapters: int | None = None
    authors: list[Author] | None = None


class RelatedManga(MalModel):
    """A manga related to the current entry."""

    node: Manga
    relation_type: RelationTypeValue
    relation_type_formatted: str | None = None


class MangaRecommendation(MalModel):
    """A manga recommended by users alongside the current entry."""

    node: Manga
    num_recommendations: int


class SerializationNode(MalModel):
    """Magazine a manga is serialized in."""

    id: int
    name: str


class Serialization(MalModel):
    node: SerializationNode
    role: str | None = None


class MangaDetails(Manga):
    """Full manga details, including detail-only fields."""

    pictures: list[Picture] | None = None
    background: str | None = None
    related_anime: list["RelatedAnime"] | None = None
    related_manga: list[RelatedManga] | None = None
    recommendations: list[MangaRecommendation] | None = None
    serialization: list[Serialization] | None = None


class MangaListEntry(MalModel):
    """Entry in a manga list; ``list_status`` is only set for user lists."""

    node: Manga
    list_status: MangaListStatus | None = None


class MangaList(PagedResponse):
    """Response of the manga search and user mangalist endpoints."""

    data: list[MangaListEntry] = Field(default_factory=list)


class MangaRankingEntry(MalModel):
    node: Manga
    ranking: Ranking


class MangaRanking(PagedResponse):
    """Response of the manga ranking endpoint."""

    data: list[MangaRankingEntry] = Field(default_factory=list)


from malapi.models.anime import RelatedAnime  # noqa: E402

MangaDetails.model_rebuild()
