# WARNING: Keep client secrets and tokens out of version control.
# Never commit a filled-in environment file.

"""Settings loader for MyAnimeList credentials.

Reads the client registration and any saved tokens from environment variables:

- MAL_CLIENT_ID
- MAL_CLIENT_SECRET (optional, for the OAuth2 code exchange)
- MAL_REDIRECT_URL (optional, only when several redirect URLs are registered)
- MAL_ACCESS_TOKEN (optional, user access token)
- MAL_REFRESH_TOKEN (optional)
- MAL_TOKEN_EXPIRES_AT (optional, epoch seconds)
"""

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from malapi.errors import CredentialError, MissingCredentialError


class Settings(BaseSettings):
    """MyAnimeList credentials taken from the environment.

    Values are read once, when the instance is created.
    """

    MAL_CLIENT_ID: str | None = None
    MAL_CLIENT_SECRET: str | None = None
    MAL_REDIRECT_URL: str | None = None
    MAL_ACCESS_TOKEN: str | None = None
    MAL_REFRESH_TOKEN: str | None = None
    MAL_TOKEN_EXPIRES_AT: int | None = None

    model_config = SettingsConfigDict(extra="ignore", env_ignore_empty=True)

    def require_keys(self, *keys: str) -> None:
        """Raise MissingCredentialError if any of *keys* is unset or blank."""
        for key in keys:
            value = getattr(self, key, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise MissingCredentialError(key)


def load_settings() -> Settings:
    """Read the environment, raising CredentialError for malformed values.

    Empty variables count as unset.
    """
    try:
        return Settings()
    except ValidationError as exc:
        names = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise CredentialError(f"Invalid credential settings: {names}") from exc
