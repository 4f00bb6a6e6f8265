"""Response models for the forum endpoints."""

from pydantic import Field

from malapi.models.common import MalModel, PagedResponse


class Subboard(MalModel):
    id: int
    title: str


class Board(MalModel):
    """A forum board and its subboards."""

    id: int
    title: str
    description: str | None = None
    subboards: list[Subboard] = Field(default_factory=list)


class Category(MalModel):
    """A group of forum boards."""

    title: str
    boards: list[Board] = Field(default_factory=list)


class ForumBoards(MalModel):
    """Response of the forum boards endpoint."""

    categories: list[Category] = Field(default_factory=list)


class PostAuthor(MalModel):
    """Author of a forum post."""

    id: int
    name: str
    # Undocumented in the API reference.
    forum_title: str | None = None
    # Spelled this way by MyAnimeList.
    forum_avator: str | None = None


class Post(MalModel):
    """A forum post. ``body`` and ``signature`` can contain raw HTML."""

    id: int
    number: int
    created_at: str
    created_by: PostAuthor
    body: str = ""
    signature: str = ""


class PollOption(MalModel):
    id: int
    text: str
    votes: int = 0


class Poll(MalModel):
    """Poll attached to a forum topic."""

    id: int
    question: str
    closed: bool = False
    options: list[PollOption] = Field(default_factory=list)


class TopicDetail(MalModel):
    """Title, posts and optional poll of a topic."""

    title: str
    posts: list[Post] = Field(default_factory=list)
    poll: Poll | None = None


class ForumTopicDetail(PagedResponse):
    """Response of the forum topic detail endpoint.

    The API reference documents ``data`` as an array but the service returns a
    single object.
    """

    data: TopicDetail


class TopicUser(MalModel):
    id: int
    name: str


class ForumTopic(MalModel):
    """A topic in forum search results."""

    id: int
    title: str
    created_at: str
    created_by: TopicUser
    number_of_posts: int = 0
    last_post_created_at: str | None = None
    last_post_created_by: TopicUser | None = None
    is_locked: bool = False


class ForumTopics(PagedResponse):
    """Response of the forum topics endpoint."""

    data: list[ForumTopic] = Field(default_factory=list)
