"""Query builder for the user information endpoint."""

from malapi.fields import USER_FIELDS, ResourceType
from malapi.queries.base import Endpoint, FieldsMixin, QueryBuilder


class GetUserInformation(FieldsMixin, QueryBuilder):
    """Profile of the authenticated user. Only ``@me`` is supported."""

    ENDPOINT = Endpoint.USER_INFORMATION
    RESOURCE = ResourceType.USER
    PATH = "users/@me"
    PARAMS = ("fields",)
    ALLOWED_FIELDS = USER_FIELDS
