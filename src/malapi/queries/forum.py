"""Query builders for the forum endpoints.

The boards listing takes no parameters, so it has no builder; see
``ForumApiClient.get_forum_boards``. Forum endpoints do not accept a
``fields`` parameter.
"""

from malapi.fields import FORUM_FIELDS, ResourceType
from malapi.models.enums import ForumTopicSort
from malapi.queries.base import (
    PAGE_OFFSET,
    Endpoint,
    PagingMixin,
    QueryBuilder,
    coerce_enum,
    require_id,
    require_text,
)


class GetForumTopicDetail(PagingMixin, QueryBuilder):
    """Posts of a single topic. Limit must be within ``[1, 100]``."""

    ENDPOINT = Endpoint.FORUM_TOPIC_DETAIL
    RESOURCE = ResourceType.FORUM
    PATH = "forum/topic/{topic_id}"
    PARAMS = ("limit", "offset")
    ALLOWED_FIELDS = FORUM_FIELDS
    BOUNDS = {"limit": (1, 100), "offset": PAGE_OFFSET}

    def __init__(self, topic_id: int) -> None:
        super().__init__(topic_id=require_id("topic_id", topic_id))


class GetForumTopics(PagingMixin, QueryBuilder):
    """Search forum topics.

    ``board_id`` and ``subboard_id`` are mutually exclusive. Limit must be
    within ``[1, 100]``.
    """

    ENDPOINT = Endpoint.FORUM_TOPICS
    RESOURCE = ResourceType.FORUM
    PATH = "forum/topics"
    PARAMS = (
        "board_id",
        "subboard_id",
        "limit",
        "offset",
        "sort",
        "q",
        "topic_user_name",
        "user_name",
    )
    ALLOWED_FIELDS = FORUM_FIELDS
    BOUNDS = {"limit": (1, 100), "offset": PAGE_OFFSET}
    CONFLICTS = (("board_id", "subboard_id"),)

    def board_id(self, value: int) -> "GetForumTopics":
        return self._set("board_id", require_id("board_id", value))

    def subboard_id(self, value: int) -> "GetForumTopics":
        return self._set("subboard_id", require_id("subboard_id", value))

    def sort(self, value: ForumTopicSort | str) -> "GetForumTopics":
        return self._set("sort", coerce_enum(ForumTopicSort, "sort", value))

    def q(self, value: str) -> "GetForumTopics":
        return self._set("q", require_text("q", value))

    def topic_user_name(self, value: str) -> "GetForumTopics":
        """Only topics started by this user."""
        return self._set("topic_user_name", require_text("topic_user_name", value))

    def user_name(self, value: str) -> "GetForumTopics":
        """Only topics this user has posted in."""
        return self._set("user_name", require_text("user_name", value))
