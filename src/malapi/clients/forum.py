"""Client for the forum endpoints."""

from malapi.auth.credentials import Credentials
from malapi.clients.base import DEFAULT_TIMEOUT, BaseApiClient
from malapi.features import Feature, require_feature
from malapi.models.forum import ForumBoards, ForumTopicDetail, ForumTopics
from malapi.queries.base import Endpoint, Query


class ForumApiClient(BaseApiClient):
    """Forum boards, topic details and topic search.

    Raises FeatureDisabledError on construction when the forum group is
    disabled.
    """

    def __init__(self, credentials: Credentials, timeout: float = DEFAULT_TIMEOUT) -> None:
        require_feature(Feature.FORUM)
        super().__init__(credentials, timeout=timeout)

    async def get_forum_boards(self) -> ForumBoards:
        resp = await self._send("GET", f"{self.BASE_URL}/forum/boards")
        return self._parse(resp, ForumBoards)

    async def get_forum_topic_detail(self, query: Query) -> ForumTopicDetail:
        self._check(query, Endpoint.FORUM_TOPIC_DETAIL)
        return await self._get(query, ForumTopicDetail)

    async def get_forum_topics(self, query: Query) -> ForumTopics:
        self._check(query, Endpoint.FORUM_TOPICS)
        return await self._get(query, ForumTopics)
