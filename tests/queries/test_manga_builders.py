"""Tests for the manga query builders."""

import pytest

from malapi.errors import InvalidFieldError, MissingParameterError, OutOfRangeError
from malapi.fields import MangaDetailField, MangaField
from malapi.models.enums import MangaRankingType, UserMangaListStatus
from malapi.queries.base import Endpoint
from malapi.queries.manga import (
    DeleteMyMangaListItem,
    GetMangaDetails,
    GetMangaList,
    GetMangaRanking,
    GetUserMangaList,
    UpdateMyMangaListStatus,
)


def test_manga_list_expected() -> None:
    query = GetMangaList("Berserk").fields(MangaField.NUM_CHAPTERS).limit(100).build()
    assert query.endpoint is Endpoint.MANGA_LIST
    assert query.path == "manga"
    assert query.as_dict()["q"] == "Berserk"


def test_manga_list_limit_over_max() -> None:
    with pytest.raises(OutOfRangeError):
        GetMangaList("Berserk").limit(101).build()


def test_manga_list_rejects_anime_only_field() -> None:
    """Failure: anime fields such as num_episodes are invalid for manga."""
    with pytest.raises(InvalidFieldError):
        GetMangaList("Berserk").fields("num_episodes").build()


def test_manga_details_accepts_serialization() -> None:
    query = GetMangaDetails(2).fields(MangaDetailField.SERIALIZATION).build()
    assert query.path == "manga/2"
    assert "serialization" in query["fields"]


def test_manga_ranking_bounds() -> None:
    query = GetMangaRanking(MangaRankingType.MANHWA).limit(500).build()
    assert query["ranking_type"] is MangaRankingType.MANHWA
    with pytest.raises(OutOfRangeError):
        GetMangaRanking().limit(501).build()


def test_user_manga_list() -> None:
    query = GetUserMangaList("someone").status(UserMangaListStatus.READING).build()
    assert query.path == "users/someone/mangalist"
    with pytest.raises(OutOfRangeError):
        GetUserMangaList("someone").limit(1001).build()


def test_update_manga_status() -> None:
    query = (
        UpdateMyMangaListStatus(2)
        .num_chapters_read(364)
        .is_rereading(False)
        .reread_value(5)
        .build()
    )
    assert query.path == "manga/2/my_list_status"
    assert query.as_dict() == {
        "is_rereading": False,
        "num_chapters_read": 364,
        "reread_value": 5,
    }


def test_update_manga_status_requires_value() -> None:
    with pytest.raises(MissingParameterError):
        UpdateMyMangaListStatus(2).build()


def test_update_manga_status_reread_value_bounds() -> None:
    with pytest.raises(OutOfRangeError):
        UpdateMyMangaListStatus(2).reread_value(6).build()


def test_delete_manga_item() -> None:
    assert DeleteMyMangaListItem(2).build().endpoint is Endpoint.DELETE_MANGA_LIST_ITEM
