"""Render finalized queries as URL parameters."""

from collections.abc import Iterable
from enum import Enum
from urllib.parse import quote, urlencode

from malapi.fields import FieldSet
from malapi.queries.base import Query


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, FieldSet):
        return value.render()
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        return ",".join(_render(item) for item in value)
    return str(value)


def serialize(query: Query) -> list[tuple[str, str]]:
    """Return the query's parameters as ``(name, value)`` string pairs.

    Pairs are in the endpoint's declared parameter order, so equal queries
    always produce equal output.
    """
    return [(name, _render(value)) for name, value in query.params]


def to_query_string(query: Query) -> str:
    """Percent-encode *query* as a URL query string.

    Commas are kept literal so field lists stay readable::

        q=One&fields=id,title,num_episodes&limit=5
    """
    return urlencode(serialize(query), quote_via=quote, safe=",")
