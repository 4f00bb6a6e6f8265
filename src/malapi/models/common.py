"""Shared response models for MyAnimeList resources.

Design:
- All response models derive from MalModel: frozen after parsing and tolerant of
  fields the API adds later (``extra="ignore"``).
- ``str(model)`` renders the non-null values as compact JSON so responses can be
  printed or logged without losing any declared value.
- PagedResponse is the base for every list response that carries ``paging``
  links; the clients' pagination helpers accept any subclass.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from malapi.models.enums import Nsfw, RelationType


class MalModel(BaseModel):
    """Base model for every MyAnimeList response object."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __str__(self) -> str:
        return self.model_dump_json(exclude_none=True)


class Paging(MalModel):
    """Links to the adjacent pages of a list response."""

    previous: str | None = None
    next: str | None = None


class PagedResponse(MalModel):
    """Base for list responses that can be paged through."""

    paging: Paging = Field(default_factory=Paging)

    @property
    def next_page_url(self) -> str | None:
        """URL of the next page, if any."""
        return self.paging.next

    @property
    def previous_page_url(self) -> str | None:
        """URL of the previous page, if any."""
        return self.paging.previous


class Picture(MalModel):
    """A picture in medium and large sizes."""

    medium: str | None = None
    large: str | None = None


class AlternativeTitles(MalModel):
    """Synonyms and localized titles."""

    synonyms: list[str] | None = None
    en: str | None = None
    ja: str | None = None


class Genre(MalModel):
    """A genre tag."""

    id: int
    name: str


class Ranking(MalModel):
    """Position of an entry in a ranking."""

    rank: int
    previous_rank: int | None = None


# Enum values fall back to the raw string for values MAL adds later.
NsfwValue = Annotated[Nsfw | str, Field(union_mode="left_to_right")]
RelationTypeValue = Annotated[RelationType | str, Field(union_mode="left_to_right")]
