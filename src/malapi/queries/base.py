"""Query builder machinery shared by every endpoint.

A builder is created from an endpoint's required arguments, collects optional
parameters through chained setters and is finalized once with ``build()``,
which validates everything and returns an immutable :class:`Query`.

Design:
- Each endpoint builder declares its constraints as class-level data
  (``PARAMS`` order, ``ALLOWED_FIELDS``, ``BOUNDS``, ``CONFLICTS``,
  ``REQUIRE_ANY``) and the base class enforces them in ``build()``.
- Required arguments are checked in the constructor; optional values are
  type-checked in their setter and range-checked in ``build()``.
- Builders are single use: ``build()`` twice, or a setter after ``build()``,
  raises AlreadyFinalizedError.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Self, TypeVar
from urllib.parse import quote

from malapi.errors import (
    AlreadyFinalizedError,
    ConflictingParametersError,
    InvalidArgumentError,
    InvalidFieldError,
    MissingParameterError,
    OutOfRangeError,
)
from malapi.fields import FieldSet, ResourceType

E = TypeVar("E", bound=Enum)

# Inclusive (lower, upper) bounds; ``None`` means unbounded above.
Bound = tuple[int, int | None]


class Endpoint(str, Enum):
    """Tag identifying which endpoint a finalized query belongs to."""

    ANIME_LIST = "anime_list"
    ANIME_DETAILS = "anime_details"
    ANIME_RANKING = "anime_ranking"
    SEASONAL_ANIME = "seasonal_anime"
    SUGGESTED_ANIME = "suggested_anime"
    USER_ANIME_LIST = "user_anime_list"
    UPDATE_ANIME_LIST_STATUS = "update_anime_list_status"
    DELETE_ANIME_LIST_ITEM = "delete_anime_list_item"
    MANGA_LIST = "manga_list"
    MANGA_DETAILS = "manga_details"
    MANGA_RANKING = "manga_ranking"
    USER_MANGA_LIST = "user_manga_list"
    UPDATE_MANGA_LIST_STATUS = "update_manga_list_status"
    DELETE_MANGA_LIST_ITEM = "delete_manga_list_item"
    FORUM_TOPIC_DETAIL = "forum_topic_detail"
    FORUM_TOPICS = "forum_topics"
    USER_INFORMATION = "user_information"


@dataclass(frozen=True)
class Query:
    """A validated, immutable request for one endpoint.

    ``path`` is relative to the API base URL. ``params`` holds only the
    parameters that were set, in the endpoint's declared order.
    """

    endpoint: Endpoint
    path: str
    params: tuple[tuple[str, Any], ...] = ()

    def get(self, name: str, default: Any = None) -> Any:  # noqa: ANN401
        """Return the value of parameter *name*, or *default* if unset."""
        for key, value in self.params:
            if key == name:
                return value
        return default

    def as_dict(self) -> dict[str, Any]:
        """Return the parameters as an (ordered) dict."""
        return dict(self.params)

    def __getitem__(self, name: str) -> Any:  # noqa: ANN401
        for key, value in self.params:
            if key == name:
                return value
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self.params)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.params)


def require_text(name: str, value: object) -> str:
    """Return *value* if it is a non-empty string."""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InvalidArgumentError(f"{name} cannot be empty")
    return value


def require_int(name: str, value: object) -> int:
    """Return *value* if it is an int (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return value


def require_id(name: str, value: object) -> int:
    """Return *value* if it is a positive integer ID."""
    number = require_int(name, value)
    if number < 1:
        raise OutOfRangeError(name, number, 1)
    return number


def require_bool(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a bool, got {type(value).__name__}")
    return value


def coerce_enum(enum_cls: type[E], name: str, value: object) -> E:
    """Convert *value* to a member of *enum_cls*, accepting members or raw values."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(str(member.value) for member in enum_cls)
        raise InvalidArgumentError(
            f"Invalid {name}: {value!r}. Must be one of: {valid}"
        ) from None


class QueryBuilder:
    """Base class for all endpoint query builders."""

    ENDPOINT: ClassVar[Endpoint]
    RESOURCE: ClassVar[ResourceType]
    PATH: ClassVar[str] = ""
    PARAMS: ClassVar[tuple[str, ...]] = ()
    ALLOWED_FIELDS: ClassVar[frozenset[str]] = frozenset()
    BOUNDS: ClassVar[dict[str, Bound]] = {}
    CONFLICTS: ClassVar[tuple[tuple[str, str], ...]] = ()
    REQUIRE_ANY: ClassVar[tuple[str, ...]] = ()

    def __init__(self, **path_args: Any) -> None:  # noqa: ANN401
        self._path_args = path_args
        self._values: dict[str, Any] = {}
        self._finalized = False

    @property
    def finalized(self) -> bool:
        """Whether ``build()`` has already been called."""
        return self._finalized

    def _set(self, name: str, value: Any) -> Self:  # noqa: ANN401
        if self._finalized:
            raise AlreadyFinalizedError(
                f"{type(self).__name__} was already built; create a new builder"
            )
        self._values[name] = value
        return self

    def build(self) -> Query:
        """Validate the collected parameters and return the finalized Query.

        Raises:
            AlreadyFinalizedError: If the builder was already built.
            InvalidFieldError: If a requested field is not allowed here.
            OutOfRangeError: If a bounded parameter is out of range.
            ConflictingParametersError: If mutually exclusive parameters are set.
            MissingParameterError: If a required group has no member set.
        """
        if self._finalized:
            raise AlreadyFinalizedError(
                f"{type(self).__name__} was already built; create a new builder"
            )
        self._validate()
        self._finalized = True
        params = tuple(
            (name, self._values[name]) for name in self.PARAMS if name in self._values
        )
        return Query(
            endpoint=self.ENDPOINT,
            path=self.PATH.format(
                **{
                    name: quote(str(value), safe="@")
                    for name, value in self._path_args.items()
                }
            ),
            params=params,
        )

    def _validate(self) -> None:
        fields = self._values.get("fields")
        if fields is not None:
            for token in fields:
                if token not in self.ALLOWED_FIELDS:
                    raise InvalidFieldError(token, self.RESOURCE.value)

        for name, (lower, upper) in self.BOUNDS.items():
            value = self._values.get(name)
            if value is None:
                continue
            if value < lower or (upper is not None and value > upper):
                raise OutOfRangeError(name, value, lower, upper)

        for pair in self.CONFLICTS:
            if all(name in self._values for name in pair):
                raise ConflictingParametersError(pair)

        if self.REQUIRE_ANY and not any(
            name in self._values for name in self.REQUIRE_ANY
        ):
            raise MissingParameterError(self.REQUIRE_ANY)


class FieldsMixin:
    """Adds the ``fields`` setter."""

    def fields(self, *fields: "FieldSet | str | Enum") -> Self:
        """Set the response fields, from a FieldSet or individual fields."""
        if len(fields) == 1 and isinstance(fields[0], FieldSet):
            field_set = fields[0]
        else:
            try:
                field_set = FieldSet.of(*fields)  # type: ignore[arg-type]
            except TypeError as exc:
                raise InvalidArgumentError(str(exc)) from exc
        return self._set("fields", field_set)  # type: ignore[attr-defined,no-any-return]


class PagingMixin:
    """Adds ``limit`` and ``offset`` setters."""

    def limit(self, value: int) -> Self:
        """Set the page size. Bounds are checked by ``build()``."""
        return self._set("limit", require_int("limit", value))  # type: ignore[attr-defined,no-any-return]

    def offset(self, value: int) -> Self:
        """Set the page offset. Must be non-negative."""
        return self._set("offset", require_int("offset", value))  # type: ignore[attr-defined,no-any-return]


class NsfwMixin:
    """Adds the ``nsfw`` toggle."""

    def nsfw(self, enabled: bool = True) -> Self:
        """Include NSFW entries in the results."""
        return self._set("nsfw", require_bool("nsfw", enabled))  # type: ignore[attr-defined,no-any-return]


PAGE_OFFSET: Bound = (0, None)
