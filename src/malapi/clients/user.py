"""Client for the user endpoint."""

from malapi.auth.credentials import Credentials
from malapi.clients.base import DEFAULT_TIMEOUT, BaseApiClient
from malapi.features import Feature, require_feature
from malapi.models.user import User
from malapi.queries.base import Endpoint, Query


class UserApiClient(BaseApiClient):
    """Profile information of the authenticated user."""

    def __init__(self, credentials: Credentials, timeout: float = DEFAULT_TIMEOUT) -> None:
        require_feature(Feature.USER)
        super().__init__(credentials, timeout=timeout)

    async def get_my_user_information(self, query: Query) -> User:
        """Requires an access token."""
        self._check(query, Endpoint.USER_INFORMATION)
        self.credentials.require_token("get_my_user_information")
        return await self._get(query, User)
