"""Credentials used to authorize API requests.

MyAnimeList accepts either a registered client ID (sent as the
``X-MAL-CLIENT-ID`` header) or a user's OAuth2 access token (sent as a bearer
token). Some endpoints, such as list updates and ``@me`` lookups, only work
with a token.
"""

from pydantic import BaseModel, ConfigDict, SecretStr

from malapi.auth.settings import load_settings
from malapi.errors import AuthenticationRequiredError, MissingCredentialError

CLIENT_ID_HEADER = "X-MAL-CLIENT-ID"


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class Credentials(BaseModel):
    """Immutable credential value shared by the endpoint clients."""

    model_config = ConfigDict(frozen=True)

    client_id: str | None = None
    access_token: SecretStr | None = None

    @classmethod
    def from_client_id(cls, client_id: str) -> "Credentials":
        """Credentials that authorize with a client ID only."""
        if _blank(client_id):
            raise MissingCredentialError("MAL_CLIENT_ID")
        return cls(client_id=client_id)

    @classmethod
    def from_token(cls, access_token: str, client_id: str | None = None) -> "Credentials":
        """Credentials that authorize with a user access token."""
        if _blank(access_token):
            raise MissingCredentialError("MAL_ACCESS_TOKEN")
        return cls(client_id=client_id or None, access_token=SecretStr(access_token))

    @classmethod
    def from_env(cls) -> "Credentials":
        """Build credentials from ``MAL_CLIENT_ID`` and ``MAL_ACCESS_TOKEN``.

        The environment is read once, here. A token takes precedence over the
        client ID when both are set.

        Raises:
            MissingCredentialError: If neither variable holds a value.
        """
        settings = load_settings()
        if not _blank(settings.MAL_ACCESS_TOKEN):
            return cls.from_token(
                settings.MAL_ACCESS_TOKEN,  # type: ignore[arg-type]
                client_id=settings.MAL_CLIENT_ID,
            )
        settings.require_keys("MAL_CLIENT_ID")
        return cls.from_client_id(settings.MAL_CLIENT_ID)  # type: ignore[arg-type]

    @property
    def is_authenticated(self) -> bool:
        """Whether a user access token is held."""
        return self.access_token is not None

    def headers(self) -> dict[str, str]:
        """Return the authorization headers for a request."""
        if self.access_token is not None:
            return {"Authorization": f"Bearer {self.access_token.get_secret_value()}"}
        if self.client_id:
            return {CLIENT_ID_HEADER: self.client_id}
        raise MissingCredentialError("MAL_CLIENT_ID")

    def require_token(self, operation: str = "this endpoint") -> None:
        """Raise AuthenticationRequiredError unless an access token is held."""
        if self.access_token is None:
            raise AuthenticationRequiredError(
                f"{operation} requires an OAuth2 access token; "
                "a client ID alone is not enough"
            )
